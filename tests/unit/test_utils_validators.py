"""Tests for utils validators module."""

from pathlib import Path
import sys
from unittest.mock import MagicMock, patch

ROOT = Path(__file__).resolve().parents[2]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from cpgdiscord.utils.validators import REQUIRED_MODULES, validate_installation


class TestValidateInstallation:
    """Test cases for validate_installation function."""

    @patch('importlib.import_module')
    def test_validate_installation_basic_success(self, mock_import):
        mock_import.return_value = MagicMock()

        issues = validate_installation(full_check=False)
        assert issues == []

        actual_calls = [call[0][0] for call in mock_import.call_args_list]
        for module in ['numpy', 'pandas', 'pysam', 'yaml', 'click', 'tqdm']:
            assert module in actual_calls

    @patch('importlib.import_module')
    def test_validate_installation_missing_module(self, mock_import):
        def import_side_effect(module_name):
            if module_name == 'pysam':
                raise ImportError(f"No module named '{module_name}'")
            return MagicMock()

        mock_import.side_effect = import_side_effect

        issues = validate_installation(full_check=False)
        assert issues == ["Missing Python module: pysam"]

    @patch('importlib.import_module')
    def test_validate_installation_all_missing(self, mock_import):
        mock_import.side_effect = ImportError("nope")
        issues = validate_installation(full_check=False)
        assert len(issues) == len(REQUIRED_MODULES)

    def test_full_check_imports_own_modules(self):
        assert validate_installation(full_check=True) == []
