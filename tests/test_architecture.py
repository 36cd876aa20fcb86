"""Check the c1/c2/c3 layer import rules over the kpt_board package."""

from scripts.validate_architecture import get_layer, validate_layer_dependencies


def test_layer_names():
    assert get_layer("c1_board_models") == "c1"
    assert get_layer("c2_board_service") == "c2"
    assert get_layer("c3_board_routes") == "c3"
    assert get_layer("core") == "other"


def test_package_follows_layer_rules():
    success, violations = validate_layer_dependencies()

    assert success, "\n".join(violations)


def test_violation_is_detected(tmp_path):
    package_dir = tmp_path / "kpt_board"
    (package_dir / "c1_bad").mkdir(parents=True)
    (package_dir / "c1_bad" / "module.py").write_text(
        "from kpt_board.c2_board_service.board_service import BoardService\n"
    )

    success, violations = validate_layer_dependencies(package_dir)

    assert not success
    assert len(violations) == 1


def test_routes_may_not_be_imported_by_services(tmp_path):
    package_dir = tmp_path / "kpt_board"
    (package_dir / "c2_service").mkdir(parents=True)
    (package_dir / "c2_service" / "module.py").write_text(
        "import kpt_board.c3_board_routes.payloads\n"
        "from kpt_board.core.config import get_settings\n"
    )

    success, violations = validate_layer_dependencies(package_dir)

    assert not success
    assert len(violations) == 1
    assert "c2 cannot import from c3 (kpt_board.c3_board_routes.payloads)" in violations[0]
