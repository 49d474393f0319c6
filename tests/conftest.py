import os

os.environ["JWT_SECRET"] = "test-secret-key-with-enough-bytes-for-hs256"
os.environ["BCRYPT_ROUNDS"] = "4"

import mongomock
import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.routers.auth import login_limiter
from app.security import create_access_token
from dnarepair.common import connect, disconnect
from dnarepair.services import admins
from tests.helpers import ADMIN_PASSWORD


@pytest.fixture(autouse=True)
def database():
    # Every test gets its own in-memory server.
    connect(host="mongodb://localhost", db="dna-repair-test", mongo_client_class=mongomock.MongoClient)
    login_limiter.reset()
    yield
    disconnect()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def admin():
    return admins.setup_first_admin("curator", ADMIN_PASSWORD, email=" Curator@Example.org ", rounds=4)


@pytest.fixture
def admin_headers(admin):
    return {"Authorization": f"Bearer {create_access_token(admin)}"}
