import logging
import os

from spritemesh import config
from spritemesh.logging_config import setup_logging


def test_assets_resolve_inside_project():
    assert os.path.isdir(config.ASSETS_PATH)
    assert os.path.isfile(config.DEFAULT_PRESETS_PATH)
    assert config.get_resource_path("assets") == config.ASSETS_PATH


def test_setup_logging_does_not_stack_handlers(tmp_path):
    setup_logging(level=logging.DEBUG)
    setup_logging(level=logging.DEBUG, log_file=str(tmp_path / "app.log"))

    logger = logging.getLogger("spritemesh")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)
    for handler in logger.handlers:
        handler.close()


def test_builder_level_follows_package_level():
    setup_logging(level=logging.WARNING)
    assert logging.getLogger("spritemesh.builders").level == logging.WARNING


def test_builder_level_is_separate(tmp_path):
    log_path = tmp_path / "builders.log"
    setup_logging(level=logging.INFO, log_file=str(log_path), builder_level=logging.DEBUG)

    logging.getLogger("spritemesh.builders.ellipse").debug("traced build")
    logging.getLogger("spritemesh.model.io").debug("hidden io detail")
    for handler in logging.getLogger("spritemesh").handlers:
        handler.flush()
        handler.close()

    text = log_path.read_text(encoding="utf-8")
    assert "traced build" in text
    assert "hidden io detail" not in text
