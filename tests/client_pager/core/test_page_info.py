from __future__ import annotations

from client_pager.core.page_info import PageInfo


def test_last_partial_page():
    info = PageInfo.build(total_records=25, page=3, per_page=10)

    assert info.total_pages == 3
    assert info.first_page == 1
    assert info.last_page == 3
    assert info.previous == 2
    assert info.next is None
    assert info.start_record == 21
    assert info.end_record == 25
    assert info.page_set == (1, 2, 3)


def test_first_page_has_no_previous():
    info = PageInfo.build(total_records=25, page=1, per_page=10)

    assert info.previous is None
    assert info.next == 2
    assert info.start_record == 1
    assert info.end_record == 10


def test_empty_dataset_has_no_pages():
    info = PageInfo.build(total_records=0, page=1, per_page=10)

    assert info.total_pages == 0
    assert info.first_page is None
    assert info.last_page is None
    assert info.previous is None
    assert info.next is None
    assert info.end_record == 0
    assert info.page_set == ()


def test_zero_based_first_page_shifts_page_set():
    info = PageInfo.build(total_records=None, page=9, per_page=10, first_page=0, total_pages=20)

    assert info.last_page == 19
    assert info.previous == 8
    assert info.next == 10
    assert info.page_set == (6, 7, 8, 9, 10, 11, 12)
    assert info.end_record == 100


def test_to_dict_is_plain_data():
    data = PageInfo.build(total_records=25, page=1, per_page=10).to_dict()

    assert data["total_records"] == 25
    assert data["page_set"] == [1, 2, 3]
