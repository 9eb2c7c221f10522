import logging

import pytest

from sorted_linked_list import demo, sorted_list as sl
from sorted_linked_list.lib import utils


def test_demo_runs(capsys: pytest.CaptureFixture[str]):
    demo.main()
    out = capsys.readouterr().out

    assert 'Added [5, 1, 9, 3, 7, 2], result: 1, 2, 3, 5, 7, 9' in out
    assert 'Fluent result: 1, 2, 3, 5, 7' in out
    assert 'Type locked to: int' in out
    assert 'New type lock: string' in out
    assert 'JSON: [1, 3, 4]' in out
    assert 'Slice (index 2, length 3): 3, 4, 5' in out
    assert 'Reverse natural: file10.txt, file2.txt, file1.txt' in out
    assert 'Final count: 999' in out


def test_log_level_from_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv(utils.LOG_LEVEL_ENV, 'warning')
    assert utils.log_level() == 'WARNING'
    assert utils.configure_logging() == 'WARNING'
    assert sl.logger.getEffectiveLevel() == logging.WARNING

    monkeypatch.delenv(utils.LOG_LEVEL_ENV)
    assert utils.configure_logging() == utils.DEFAULT_LOG_LEVEL


def test_kind_mismatch_is_logged(caplog: pytest.LogCaptureFixture):
    lst = sl.SortedLinkedList().with_(1)
    with caplog.at_level(logging.WARNING, logger=sl.logger.name):
        with pytest.raises(sl.KindMismatch):
            lst.add('x')
    assert 'list holds int, got string' in caplog.text


@pytest.mark.parametrize('bogus', ('verbose', 'loud', ''))
def test_unknown_log_level_falls_back_to_default(
    monkeypatch: pytest.MonkeyPatch, bogus: str
):
    monkeypatch.setenv(utils.LOG_LEVEL_ENV, bogus)
    assert utils.log_level() == utils.DEFAULT_LOG_LEVEL
    assert utils.get_logger('sorted_linked_list.tests').level == logging.INFO
    assert utils.configure_logging() == utils.DEFAULT_LOG_LEVEL
    assert utils.configure_logging('verbose') == utils.DEFAULT_LOG_LEVEL
    assert sl.logger.getEffectiveLevel() == logging.INFO


def test_insert_and_unlink_paths_are_logged(caplog: pytest.LogCaptureFixture):
    lst = sl.SortedLinkedList()
    with caplog.at_level(logging.DEBUG, logger=sl.logger.name):
        lst.with_all([5, 1, 9, 3]).without(3)
    text = caplog.text
    assert 'inserted 5 into an empty list' in text
    assert 'prepended 1' in text
    assert 'appended 9' in text
    assert 'inserted 3 before 5' in text
    assert 'unlinked 3' in text
