"""Unit tests for the permission_action and binary_action modules."""

from dirclip.file_system_tree.binary_action import BinaryAction
from dirclip.file_system_tree.permission_action import PermissionAction


def test_permission_action_enum():
    """Test the PermissionAction enum values."""
    assert PermissionAction.IGNORE == "ignore"
    assert PermissionAction.RAISE == "raise"

    # Test string conversion works both ways
    assert PermissionAction("ignore") == PermissionAction.IGNORE
    assert PermissionAction("raise") == PermissionAction.RAISE


def test_binary_action_enum():
    """Test the BinaryAction enum values."""
    assert BinaryAction.IGNORE == "ignore"
    assert BinaryAction.RAISE == "raise"
    assert BinaryAction("raise") is BinaryAction.RAISE


def test_actions_are_distinct_types():
    assert PermissionAction.IGNORE is not BinaryAction.IGNORE
    assert isinstance(PermissionAction.IGNORE, str)
