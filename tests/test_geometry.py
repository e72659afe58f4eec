from breakout.core.geometry import Rect, spans_overlap, strictly_between


def test_rect_edges():
    rect = Rect(1.0, 2.0, 3.0, 4.0)
    assert rect.right == 4.0
    assert rect.bottom == 6.0


def test_spans_overlap_is_open():
    assert spans_overlap(0, 2, 1, 3)
    assert not spans_overlap(0, 1, 1, 2)
    assert not spans_overlap(2, 3, 0, 2)


def test_strictly_between():
    assert strictly_between(0.5, 0, 1)
    assert not strictly_between(0, 0, 1)
    assert not strictly_between(1, 0, 1)
