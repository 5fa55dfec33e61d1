import pytest

pygame = pytest.importorskip('pygame')

from challenges.registry import CHALLENGE_REGISTRY
from core.engine import SessionEngine
from core.game import Game
from core.store import MemoryStore
from settings import START_CODE


def _key(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def _text(text):
    return pygame.event.Event(pygame.TEXTINPUT, text=text)


@pytest.fixture()
def game():
    game = Game(SessionEngine(MemoryStore()))
    game.open('ada', 5)
    return game


def test_open_starts_new_session(game):
    assert game.engine.running is True
    assert game.engine.user_name == 'ada'
    assert game.engine.full_time == 5


def test_open_resumes_stored_session():
    store = MemoryStore()
    first = Game(SessionEngine(store))
    first.open('ada', 5)
    first.handle_event(_text('a'))

    second = Game(SessionEngine(store))
    second.open('someone-else', 99)
    assert second.engine.user_name == 'ada'
    assert second.engine.code == START_CODE + 'a'
    assert second.engine.countdown_active is True


def test_typing_updates_code_and_score(game):
    game.handle_event(_text('<'))
    game.handle_event(_text('p'))
    game.handle_event(_key(pygame.K_RETURN))
    game.handle_event(_key(pygame.K_BACKSPACE))
    assert game.engine.code == START_CODE + '<p'
    assert game.engine.score == 4
    assert game.engine.countdown_active is True


def test_f2_cycles_challenges(game):
    first = game.engine.challenge
    game.handle_event(_key(pygame.K_F2))
    idx = CHALLENGE_REGISTRY.index(first)
    assert game.engine.challenge == CHALLENGE_REGISTRY[(idx + 1) % len(CHALLENGE_REGISTRY)]


def test_escape_disposes_and_quits(game):
    game.handle_event(_text('x'))
    game.handle_event(_key(pygame.K_ESCAPE))
    assert game.quit_requested is True
    assert game.engine.running is False
    assert game.engine.countdown_active is False


def test_update_flags_expiry(game):
    game.handle_event(_text('x'))
    game.update(5.0)
    assert game._expired is False
    game.update(0.2)
    assert game._expired is True
    game.handle_event(_text('y'))
    assert game._expired is False
