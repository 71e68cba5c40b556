"""Test for __main__.py module."""

from unittest.mock import patch


def test_main_module():
    """Test that __main__.py can be imported and does not call cli."""
    with patch('lanzo.cli.main.cli') as mock_cli:
        import lanzo.__main__  # noqa: F401
        mock_cli.assert_not_called()
