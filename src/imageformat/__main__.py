from imageformat.cli import main

main()
