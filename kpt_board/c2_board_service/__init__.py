"""Board services: reconciliation, query assembly and deletion cascade."""

from kpt_board.c2_board_service.assembler import assemble
from kpt_board.c2_board_service.reconciler import BoardReconciler, check_board_id, parse_board_id
from kpt_board.c2_board_service.board_service import BoardService

__all__ = ["assemble", "BoardReconciler", "check_board_id", "parse_board_id", "BoardService"]
