"""Ownership and visibility rules for boards."""

from kpt_board.c1_board_policy.policy import assert_owner, can_read, assert_readable, is_owner

__all__ = ["assert_owner", "can_read", "assert_readable", "is_owner"]
