import logging

import pytest

from app.grouping.grouper import Grouper
from app.grouping.models import GroupingMode
from app.logging.logger import Log
from app.processor.models import UploadedDocument


class TestLog:
    def test_keyword_arguments_become_record_fields(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO, logger="pdfmerger")

        Log.info("Working on group 25-02050", group_key="25-02050")

        record = caplog.records[-1]
        assert record.name == "pdfmerger"
        assert record.getMessage() == "Working on group 25-02050"
        assert record.group_key == "25-02050"

    def test_configure_attaches_one_handler(self) -> None:
        Log.configure("warning")
        Log.configure("warning")

        logger = logging.getLogger("pdfmerger")
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
        logger.setLevel(logging.NOTSET)

    def test_skipped_document_is_tagged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="pdfmerger")

        Grouper(GroupingMode.STRICT).group([UploadedDocument("notes.pdf", b"")])

        tagged = [r for r in caplog.records if getattr(r, "document", None) == "notes.pdf"]
        assert len(tagged) == 1
        assert tagged[0].levelno == logging.WARNING
