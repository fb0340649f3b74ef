"""
Simple example of using imageformat to format an image
"""

from pathlib import Path

from imageformat import Crop, Options, Resize, Thumb, format_file


def main():
    # Replace with actual image path
    image_path = Path("example.jpg")

    if not image_path.exists():
        print(f"Error: {image_path} not found")
        print("Please provide a valid image path")
        return

    print(f"Formatting {image_path}...")
    print("-" * 60)

    options = Options(
        rotate=-90,
        fill="white",
        crop=Crop(x=0, y=0, width=600, height=600),
        resize=Resize(width=300),  # height 0 -> 300x300
        thumbnails=(
            Thumb(suffix="-small", width=150, height=150),
            Thumb(suffix="-icon", width=32),
        ),
    )

    def on_step(event):
        state = "applied" if event.changed else "skipped"
        print(f"  {event.step:<10} {state:<8} {event.size[0]}x{event.size[1]}  {event.name}")

    result = format_file(image_path, Path("formatted") / image_path.name, options, observer=on_step)

    if result.success:
        print("\n✓ Success!\n")
        print(f"Formatted:      {result.formatted}")
        for thumb in result.thumbnails:
            print(f"Thumbnail:      {thumb}")
    else:
        print(f"✗ Failed: {result.error}")


if __name__ == "__main__":
    main()
