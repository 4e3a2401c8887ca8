import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from quiz_service import models  # noqa: F401
from quiz_service.core.auth import create_token
from quiz_service.core.config import settings
from quiz_service.core.database import Base, get_db
from quiz_service.main import app
from quiz_service.models.question import Question
from quiz_service.models.quiz_config import QuizConfig


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(bind=engine, autocommit=False, autoflush=False)
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(client):
    client.cookies.set(settings.ADMIN_COOKIE_NAME, create_token("1", "admin@quiz.com"))
    return client


@pytest.fixture
def make_questions(db_session):
    """Insert n questions; question i has correct answer i % 4"""

    def _make(n):
        questions = [
            Question(
                question_text=f"Question {i}?",
                options=[f"Q{i} option {k}" for k in range(4)],
                correct_answer=i % 4,
                difficulty="medium",
            )
            for i in range(n)
        ]
        db_session.add_all(questions)
        db_session.commit()
        for question in questions:
            db_session.refresh(question)
        return questions

    return _make


@pytest.fixture
def set_config(db_session):
    def _set(**values):
        config = QuizConfig(singleton_key=1, **values)
        db_session.add(config)
        db_session.commit()
        db_session.refresh(config)
        return config

    return _set
