"""
Tests for service configuration
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from imageformat.config import ServiceConfig


def test_defaults():
    config = ServiceConfig()
    assert config.root == Path(".")
    assert config.host == "0.0.0.0"
    assert config.port == 8080


def test_from_env():
    config = ServiceConfig.from_env({
        "IMAGEFORMAT_ROOT": "/srv/images",
        "IMAGEFORMAT_PORT": "9000",
        "IMAGEFORMAT_MAX_UPLOAD_BYTES": "1024",
        "UNRELATED": "x",
    })
    assert config.root == Path("/srv/images")
    assert config.port == 9000
    assert config.max_upload_bytes == 1024
    assert config.host == "0.0.0.0"


def test_empty_values_ignored():
    assert ServiceConfig.from_env({"IMAGEFORMAT_PORT": ""}).port == 8080


def test_invalid_port():
    with pytest.raises(ValidationError):
        ServiceConfig.from_env({"IMAGEFORMAT_PORT": "70000"})
