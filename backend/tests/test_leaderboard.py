import json
import threading

import pytest

from wordgame.errors import NotFoundError, StorageError, ValidationError
from wordgame.models import ScoreEntry
from wordgame.services.leaderboard import LeaderboardStore


@pytest.fixture()
def scores_path(tmp_path):
    return str(tmp_path / 'scores.json')


@pytest.fixture()
def board(scores_path):
    return LeaderboardStore(scores_path)


def test_starts_empty_without_file(board):
    assert board.list() == []
    assert len(board) == 0


def test_insert_new_nickname(board):
    assert board.upsert('alice', 100) is True
    assert board.list() == [ScoreEntry('alice', 100)]


def test_lower_score_does_not_replace(board):
    assert board.upsert('alice', 100) is True
    assert board.upsert('alice', 50) is False
    assert board.score_of('alice') == 100


def test_equal_score_is_not_a_change(board):
    board.upsert('alice', 100)
    assert board.upsert('alice', 100) is False


def test_higher_score_replaces(board):
    board.upsert('alice', 100)
    assert board.upsert('alice', 300) is True
    assert board.list() == [ScoreEntry('alice', 300)]


def test_nickname_match_is_case_insensitive(board):
    board.upsert('Alice', 100)
    assert board.upsert('alice', 200) is True
    assert len(board) == 1
    assert board.rank_of('ALICE') == 1
    assert board.score_of('alice') == 200


def test_sorted_descending_after_every_mutation(board):
    for nickname, score in [('a', 10), ('b', 50), ('c', 30), ('a', 70), ('d', 5)]:
        board.upsert(nickname, score)
        values = [e.score for e in board.list()]
        assert values == sorted(values, reverse=True)
    assert [e.nickname for e in board.list()] == ['a', 'b', 'c', 'd']


def test_ties_keep_insertion_order(board):
    board.upsert('first', 100)
    board.upsert('second', 100)
    board.upsert('third', 100)
    assert [e.nickname for e in board.list()] == ['first', 'second', 'third']


def test_rank_and_top_n(board):
    for nickname, score in [('a', 10), ('b', 50), ('c', 30)]:
        board.upsert(nickname, score)
    assert board.rank_of('b') == 1
    assert board.rank_of('a') == 3
    assert [e.nickname for e in board.top_n(2)] == ['b', 'c']
    assert len(board.top_n(10)) == 3
    assert board.top_n(0) == []


def test_rank_of_missing_nickname(board):
    with pytest.raises(NotFoundError):
        board.rank_of('ghost')


def test_rejects_bad_input(board):
    with pytest.raises(ValidationError):
        board.upsert('   ', 10)
    with pytest.raises(ValidationError):
        board.upsert('bob', -1)
    with pytest.raises(ValidationError):
        board.top_n(-1)


def test_persists_and_reloads(board, scores_path):
    board.upsert('alice', 100)
    board.upsert('bob', 200)
    with open(scores_path) as f:
        assert json.load(f) == [{'nickname': 'bob', 'score': 200}, {'nickname': 'alice', 'score': 100}]
    reloaded = LeaderboardStore(scores_path)
    assert reloaded.list() == board.list()


def test_reload_sorts_unsorted_file(scores_path):
    with open(scores_path, 'w') as f:
        json.dump([{'nickname': 'low', 'score': 1}, {'nickname': 'high', 'score': 9}], f)
    assert [e.nickname for e in LeaderboardStore(scores_path).list()] == ['high', 'low']


def test_corrupt_file_is_fatal(scores_path):
    with open(scores_path, 'w') as f:
        f.write('{not json')
    with pytest.raises(StorageError):
        LeaderboardStore(scores_path)


def test_failed_save_leaves_board_unchanged(board, monkeypatch):
    board.upsert('alice', 100)

    def broken_save(records):
        raise StorageError('Failed to save data to file')

    monkeypatch.setattr(board._storage, 'save', broken_save)
    with pytest.raises(StorageError):
        board.upsert('alice', 500)
    with pytest.raises(StorageError):
        board.upsert('bob', 10)
    assert board.list() == [ScoreEntry('alice', 100)]


def test_seed_keeps_best_per_nickname(board):
    board.seed([ScoreEntry('a', 5), ScoreEntry('b', 9), ScoreEntry('A', 7)])
    assert board.list() == [ScoreEntry('b', 9), ScoreEntry('A', 7)]


def test_concurrent_upserts_keep_single_best_entry(board):
    def submit(offset):
        for i in range(20):
            board.upsert('racer', offset * 100 + i)
            board.upsert(f'player{offset}', i)

    threads = [threading.Thread(target=submit, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    entries = board.list()
    nicknames = [e.nickname for e in entries]
    assert len(nicknames) == len(set(nicknames)) == 5
    assert board.score_of('racer') == 319
    assert [e.score for e in entries] == sorted((e.score for e in entries), reverse=True)


@pytest.mark.parametrize('records', [
    [{'nickname': None, 'score': 5}],
    [{'nickname': '  ', 'score': 5}],
    [{'nickname': 'alice', 'score': -1}],
    [{'nickname': 'alice', 'score': 5.5}],
    [{'nickname': 'alice', 'score': True}],
    [{'nickname': 'alice', 'score': '5'}],
    [{'nickname': 'alice', 'score': 5}, {'nickname': 'ALICE', 'score': 9}],
])
def test_invalid_records_are_fatal_on_load(scores_path, records):
    with open(scores_path, 'w') as f:
        json.dump(records, f)
    with pytest.raises(StorageError):
        LeaderboardStore(scores_path)


def test_submit_returns_rank_from_same_update(board):
    board.upsert('leader', 900)
    assert board.submit('alice', 100) == (True, 2)
    assert board.submit('alice', 50) == (False, 2)
    assert board.submit('alice', 1000) == (True, 1)
    assert board.rank_of('leader') == 2
