"""
Tests for the SystemDependencyChecker class.
"""

from unittest.mock import patch

from archlink.core.system_dependency_checker import SystemDependencyChecker


class TestSystemDependencyChecker:
    """Test cases for SystemDependencyChecker."""

    def setup_method(self):
        """Set up test fixtures."""
        self.checker = SystemDependencyChecker()

    def test_init(self):
        """Test SystemDependencyChecker initialization."""
        assert isinstance(self.checker._checked_commands, dict)
        assert len(self.checker._checked_commands) == 0

    @patch('shutil.which')
    def test_check_command_availability_available(self, mock_which):
        """Test checking for an available command."""
        mock_which.return_value = '/usr/bin/yay'

        result = self.checker.check_command_availability('yay')

        assert result is True
        assert self.checker._checked_commands['yay'] is True
        mock_which.assert_called_once_with('yay')

    @patch('shutil.which')
    def test_check_command_availability_missing(self, mock_which):
        """Test checking for a missing command."""
        mock_which.return_value = None

        result = self.checker.check_command_availability('paru')

        assert result is False
        assert self.checker._checked_commands['paru'] is False

    @patch('shutil.which')
    def test_check_command_availability_cached(self, mock_which):
        """Test that command availability is cached."""
        mock_which.return_value = '/usr/bin/pacman'

        result1 = self.checker.check_command_availability('pacman')
        result2 = self.checker.check_command_availability('pacman')

        assert result1 is True
        assert result2 is True
        mock_which.assert_called_once_with('pacman')

    def test_get_installation_instructions_known_command(self):
        """Test getting installation instructions for a known command."""
        instructions = self.checker.get_installation_instructions('yay')

        assert 'aur.archlinux.org/packages/yay' in instructions
        assert 'not available' not in instructions

    def test_get_installation_instructions_unknown_command(self):
        """Test getting installation instructions for an unknown command."""
        instructions = self.checker.get_installation_instructions('pikaur')

        assert 'pikaur' in instructions
        assert 'not available' in instructions

    def test_installation_instructions_coverage(self):
        """Test that instructions exist for every command archlink runs."""
        for command in ['pacman', 'sudo', 'yay', 'paru']:
            instructions = self.checker.get_installation_instructions(command)
            assert len(instructions) > 0
            assert 'not available' not in instructions

    @patch('archlink.core.system_dependency_checker.logger')
    def test_log_missing_dependency_first_time(self, mock_logger):
        """Test logging a missing dependency for the first time."""
        self.checker.log_missing_dependency('paru', 'install')

        mock_logger.debug.assert_called_once()
        message = mock_logger.debug.call_args[0][0]
        assert 'paru' in message
        assert 'install' in message

    @patch('archlink.core.system_dependency_checker.logger')
    def test_log_missing_dependency_duplicate(self, mock_logger):
        """Test that duplicate missing dependency logs are suppressed."""
        self.checker.log_missing_dependency('paru', 'install')
        self.checker.log_missing_dependency('paru', 'install')

        mock_logger.debug.assert_called_once()

    @patch('archlink.core.system_dependency_checker.logger')
    def test_log_missing_dependency_per_component(self, mock_logger):
        """Test that the same command is logged once per component."""
        self.checker.log_missing_dependency('pacman', 'local search')
        self.checker.log_missing_dependency('pacman', 'install')

        assert mock_logger.debug.call_count == 2

