import os
import random
import sys
import pytest

# Ensure the backend root (containing the `hijaiyyah` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from hijaiyyah import create_app, db, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    CORS_ORIGINS = ['http://localhost:5173']
    DEFAULT_START_LEVEL = 1
    DEFAULT_LIVES = 3
    DEFAULT_QUESTION_LIMIT = 10
    RECENT_ANSWERS_LIMIT = 5
    CONTENT_SEED = 1234


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import hijaiyyah.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    if test_client.is_connected('/ws'):
        test_client.disconnect(namespace='/ws')


@pytest.fixture()
def seeded(flask_app):
    """Full Hijaiyyah content: 28 letters, 4 levels, 56 questions."""
    from hijaiyyah.content import seed_content
    return seed_content(rng=random.Random(TestConfig.CONTENT_SEED))


@pytest.fixture()
def quiz(flask_app):
    """Minimal content: one level requiring 5 questions and one question."""
    from hijaiyyah.models import GameLevel, HijaiyyahLetter, Question

    letter = HijaiyyahLetter(letter='ا', name='Alif', pronunciation='alif', level=1)
    db.session.add(letter)
    db.session.flush()
    level = GameLevel(
        level_number=1,
        name='Level 1',
        questions_required=5,
        letters_introduced=[letter.id],
        is_unlocked=True,
    )
    db.session.add(level)
    db.session.flush()
    question = Question(
        type='visual_identification',
        level_id=level.id,
        letter_id=letter.id,
        correct_answer='Alif',
        options=['Alif', 'Ba', 'Ta', 'Tsa'],
    )
    db.session.add(question)
    db.session.commit()
    return {'letter': letter, 'level': level, 'question': question}
