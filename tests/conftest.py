import json
import pytest
from fastapi.testclient import TestClient

from skytap_builder.main import app
from skytap_builder.schemas.build import BuildContext, GlobalOptions

SKYTAP = "https://cloud.skytap.com"


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def build(tmp_path):
    return BuildContext(
        build_id="42",
        workspace=str(tmp_path),
        env={"SKYTAP_USER": "alice", "SKYTAP_API_KEY": "secret", "CONF_DIR": "envs"},
    )


@pytest.fixture
def options():
    return GlobalOptions(logging_enabled=True, strict_responses=False)


@pytest.fixture
def reference_file(tmp_path):
    def _write(name: str, payload) -> str:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
        return str(path)
    return _write
