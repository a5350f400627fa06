import statistics

import pytest

from algodays.design import MedianFinder, MyQueue, WordDictionary


def test_queue_is_fifo():
    q = MyQueue()
    items = [5, 1, 9, 3]
    for item in items:
        q.push(item)
    assert q.peek() == items[0]
    assert [q.pop() for _ in items] == items
    assert q.empty() is True


def test_queue_interleaved():
    q = MyQueue()
    q.push(1)
    q.push(2)
    assert q.pop() == 1
    q.push(3)
    assert len(q) == 2
    assert q.pop() == 2
    assert q.peek() == 3
    assert q.empty() is False


def test_queue_empty_errors():
    q = MyQueue()
    assert q.empty() is True
    with pytest.raises(IndexError):
        q.pop()
    with pytest.raises(IndexError):
        q.peek()


@pytest.fixture
def dictionary():
    d = WordDictionary()
    for word in ["bad", "dad", "mad"]:
        d.add_word(word)
    return d


@pytest.mark.parametrize(
    "query,found",
    [("pad", False), ("bad", True), (".ad", True), ("b..", True), ("...", True),
     ("..", False), ("ba", False), ("b.d.", False)],
)
def test_word_dictionary_search(dictionary, query, found):
    assert dictionary.search(query) is found


def test_word_dictionary_empty():
    assert WordDictionary().search("a") is False


def test_median_finder_example():
    mf = MedianFinder()
    mf.add_num(1)
    mf.add_num(2)
    assert mf.find_median() == 1.5
    mf.add_num(3)
    assert mf.find_median() == 2.0


def test_median_finder_matches_statistics():
    stream = [5, -3, 12, 7, 7, 0, 40, -8, 2]
    mf = MedianFinder()
    for i, value in enumerate(stream, start=1):
        mf.add_num(value)
        assert mf.find_median() == pytest.approx(statistics.median(stream[:i]))


def test_median_finder_empty():
    with pytest.raises(ValueError):
        MedianFinder().find_median()