from ultimatettt.plays import Play, PlayHistory, format_play


def _history(count):
    history = PlayHistory()
    for n in range(count):
        history.add(n % 9, n % 3, (n + 1) % 3, n, n % 2 + 1)
    return history


def test_add_keeps_order():
    history = PlayHistory()
    first = history.add(4, 0, 2, 0, 1)
    second = history.add(2, 1, 1, 1, 2)
    assert list(history) == [first, second]
    assert len(history) == 2
    assert first == Play(board=4, x=0, y=2, n_plays=0, player=1)


def test_initial_plays_are_copied():
    source = [Play(1, 0, 0, 0, 1)]
    history = PlayHistory(source)
    history.add(2, 1, 1, 1, 2)
    assert len(source) == 1
    assert len(history) == 2


def test_format_play():
    assert format_play(Play(board=4, x=0, y=2, n_plays=0, player=1)) == (
        "Player 1 made the move (0,2) on Board [4]"
    )


def test_last_is_newest_first():
    history = _history(5)
    plays = list(history)
    assert history.last(3) == [plays[4], plays[3], plays[2]]


def test_last_capped_at_ten():
    history = _history(15)
    shown = history.last(12)
    assert len(shown) == 10
    assert shown[0] == list(history)[-1]


def test_last_more_than_available():
    history = _history(2)
    assert history.last(5) == list(reversed(list(history)))


def test_last_non_positive_is_empty():
    history = _history(4)
    assert history.last(0) == []
    assert history.last(-3) == []


def test_describe_empty():
    assert PlayHistory().describe() == "Empty list\n"


def test_describe_lists_nodes():
    history = PlayHistory()
    history.add(4, 0, 2, 0, 1)
    history.add(2, 1, 1, 1, 2)
    text = history.describe()
    assert text.startswith("Node: 1 \nx=0\ty=2\tBoard: 4\tPlays: 0\tPlayer: 1\n")
    assert text.count("Node: ") == 2
    assert "Node: 2 \n" in text