"""Verify package imports work correctly."""


def test_import_pullxml() -> None:
    """Test that pullxml can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import pullxml

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert pullxml.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from pullxml import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_names_resolve() -> None:
    import pullxml

    for name in pullxml.__all__:
        assert hasattr(pullxml, name), name
