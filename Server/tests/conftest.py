import os
import tempfile

# Keep test logs out of the working tree; must run before wordle_chain is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordle_chain_logs_'))

import pytest

from wordle_chain import create_app
from wordle_chain.config import TestingConfig
from wordle_chain.models import EncodedWord
from wordle_chain.services import AttestationBackend, ProofChain, initialize_game_service
from wordle_chain.services import game_service as game_service_module

TEST_SECRET = 'test-secret-' + 'x' * 40


@pytest.fixture
def backend():
    backend = AttestationBackend(TEST_SECRET)
    backend.compile()
    return backend


@pytest.fixture
def chain(backend):
    return ProofChain(backend, 'hello')


@pytest.fixture
def hello():
    return EncodedWord.from_string('hello')


@pytest.fixture
def exile():
    return EncodedWord.from_string('exile')


@pytest.fixture
def service(chain):
    service = initialize_game_service(chain, keep_history=True)
    yield service
    game_service_module._game_service = None


@pytest.fixture
def client(service):
    app = create_app(TestingConfig)
    return app.test_client()
