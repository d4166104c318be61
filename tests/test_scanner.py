"""
Unit tests for scanner module functions.
"""

import os
import pytest
from cryptoicons.scanner import (
    parse_icon_filename,
    find_icon_files,
    search_icon_files,
    resolve_icon,
    content_type_for,
    candidate_filenames,
)


class TestParseIconFilename:
    """Test parse_icon_filename function."""

    @pytest.mark.parametrize("filename,expected", [
        ("BTC.png", ("BTC", "png")),
        ("eth.svg", ("eth", "svg")),
        ("Doge.JPG", ("Doge", "JPG")),
        ("shib.Jpeg", ("shib", "Jpeg")),
        ("1000SATS.png", ("1000SATS", "png")),
    ])
    def test_recognised_formats(self, filename, expected):
        """Test symbol and format keep their original case."""
        assert parse_icon_filename(filename) == expected

    @pytest.mark.parametrize("filename", ["notes.txt", "BTC.gif", "BTC", ".png", "icon.png.bak"])
    def test_unrecognised(self, filename):
        """Test non-icon filenames are rejected."""
        assert parse_icon_filename(filename) is None


class TestFindIconFiles:
    """Test find_icon_files function."""

    def test_one_entry_per_file(self, sample_icons, icons_dir):
        """Test every icon file is listed once and other files are skipped."""
        icons = find_icon_files(icons_dir)
        names = [f"{icon.symbol}.{icon.format}" for icon in icons]
        assert names == ["BTC.png", "DOGE.jpg", "SHIB.jpeg", "eth.png", "eth.svg"]

    def test_subdirectories_not_scanned(self, sample_icons, icons_dir):
        """Test files in nested directories are ignored."""
        symbols = {icon.symbol for icon in find_icon_files(icons_dir)}
        assert "SOL" not in symbols

    def test_directory_named_like_icon_skipped(self, icons_dir):
        """Test a directory with an icon extension is not treated as a file."""
        (icons_dir / "FAKE.png").mkdir()
        assert find_icon_files(icons_dir) == []

    def test_empty_directory(self, icons_dir):
        """Test scanning empty directory."""
        assert find_icon_files(icons_dir) == []

    def test_missing_directory(self, temp_dir):
        """Test missing directory raises."""
        with pytest.raises(FileNotFoundError):
            find_icon_files(temp_dir / "nope")


class TestSearchIconFiles:
    """Test search_icon_files function."""

    def test_case_insensitive_substring(self, sample_icons, icons_dir):
        """Test query matches anywhere in the symbol, ignoring case."""
        results = search_icon_files(icons_dir, "TH")
        assert [icon.symbol for icon in results] == ["eth", "eth"]

    def test_substring_not_prefix_only(self, sample_icons, icons_dir):
        """Test infix matches are returned."""
        results = search_icon_files(icons_dir, "og")
        assert [icon.symbol for icon in results] == ["DOGE"]

    def test_no_matches(self, sample_icons, icons_dir):
        """Test search with no matches returns empty list."""
        assert search_icon_files(icons_dir, "xyz") == []


class TestContentType:
    """Test content_type_for function."""

    def test_svg(self):
        assert content_type_for("svg") == "image/svg+xml"

    def test_raster_formats(self):
        assert content_type_for("png") == "image/png"
        assert content_type_for("jpg") == "image/jpg"
        assert content_type_for("JPEG") == "image/jpeg"


class TestResolveIcon:
    """Test resolve_icon function."""

    def test_candidates_in_priority_order(self):
        """Test candidate filenames follow png, svg, jpg, jpeg."""
        assert candidate_filenames("BTC") == ["BTC.png", "BTC.svg", "BTC.jpg", "BTC.jpeg"]

    def test_png_wins_over_svg(self, sample_icons, icons_dir):
        """Test png has priority when several formats exist."""
        icon = resolve_icon(icons_dir, "eth")
        assert icon is not None
        assert icon.format == "png"
        assert icon.symbol == "ETH"

    def test_svg_before_jpg(self, icons_dir):
        """Test svg is preferred over jpg."""
        (icons_dir / "ADA.jpg").write_bytes(b"jpg")
        (icons_dir / "ADA.svg").write_text("<svg/>")
        assert resolve_icon(icons_dir, "ada").format == "svg"

    def test_falls_through_to_jpeg(self, sample_icons, icons_dir):
        """Test lowest priority format is found when it is the only one."""
        icon = resolve_icon(icons_dir, "shib")
        assert icon.format == "jpeg"

    def test_exact_name_preferred_over_case_variant(self, icons_dir):
        """Test an exactly-named file wins over a name differing in case."""
        (icons_dir / "XRP.png").write_bytes(b"upper")
        (icons_dir / "xrp.png").write_bytes(b"lower")
        if len(list(icons_dir.iterdir())) < 2:
            pytest.skip("case-insensitive filesystem")
        icon = resolve_icon(icons_dir, "xrp")
        assert icon.path.endswith("XRP.png")

    def test_exact_name_directory_falls_back_to_case_variant(self, icons_dir):
        """Test a directory with the exact name does not hide a file in another case."""
        (icons_dir / "ETH.png").mkdir()
        try:
            (icons_dir / "eth.png").write_bytes(b"png")
        except OSError:
            pytest.skip("case-insensitive filesystem")
        (icons_dir / "ETH.svg").write_text("<svg/>")

        icon = resolve_icon(icons_dir, "eth")
        assert icon.format == "png"
        assert icon.path.endswith("eth.png")

    def test_symlink_outside_directory_not_served(self, icons_dir, temp_dir):
        """Test a link pointing outside the icons directory is ignored."""
        secret = temp_dir / "secret.png"
        secret.write_bytes(b"secret")
        try:
            os.symlink(secret, icons_dir / "EVIL.png")
        except (OSError, NotImplementedError):
            pytest.skip("symlinks not supported")

        assert resolve_icon(icons_dir, "evil") is None

    def test_symlink_inside_directory_served(self, icons_dir):
        """Test a link to another file in the icons directory resolves."""
        (icons_dir / "WBTC.png").write_bytes(b"wbtc")
        try:
            os.symlink(icons_dir / "WBTC.png", icons_dir / "BTCB.png")
        except (OSError, NotImplementedError):
            pytest.skip("symlinks not supported")

        assert resolve_icon(icons_dir, "btcb").format == "png"

    def test_unknown_symbol(self, sample_icons, icons_dir):
        """Test unknown symbol returns None."""
        assert resolve_icon(icons_dir, "NOPE") is None

    def test_missing_directory(self, temp_dir):
        """Test missing directory resolves nothing."""
        assert resolve_icon(temp_dir / "nope", "BTC") is None
