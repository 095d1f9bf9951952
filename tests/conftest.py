import base64
import hashlib
import hmac
import json

import jwt
import pytest
from fastapi import Depends, FastAPI
from starlette.testclient import TestClient

from jwt_gate import GateConfig, JWTGateMiddleware, get_token_claims, require_token_claims

SECRET = "this is a test secret for the jwt gate"

# RS256 token with a header that declares an asymmetric algorithm
RS256_TOKEN = (
    "eyJ0eXAiOiJKV1QiLCJhbGciOiJSUzI1NiJ9.eyJmb28iOiJiYXIifQ."
    "FhkiHkoESI_cG3NPigFrxEk9Z60_oXrOT2vGm9Pn6RDgYNovYORQmmA0zs1AoAOf09ly2Nx2YAg6ABqAYga1"
    "AcMFkJljwxTT5fYphTuqpWdy4BELeSYJx5Ty2gmr8e7RonuUztrdD5WfPqLKMm1Ozp_T6zALpRmwTIW0QPn"
    "aBXaQD90FplAg46Iy1UlDKr-Eupy0i5SLch5Q-p2ZpaL_5fnTIUDlxC3pWhJTyx_71qDI-mAA_5lE_VdroOe"
    "flG56sSmDxopPEG3bFlSu1eowyBfxtu0_CuVd-M42RU75Zc4Gsj6uV77MBtbMrf4_7M_NUTSgoIF3fRqxrj0N"
    "zihIBg"
)


def _b64(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode()


def make_token(payload=None, secret=SECRET, algorithm="HS256") -> str:
    return jwt.encode(payload or {}, secret, algorithm=algorithm)


def forge_token(header: dict, payload=None, secret=SECRET) -> str:
    """Build a token by hand, HMAC-SHA256 signed regardless of the declared alg."""
    signing_input = ".".join([
        _b64(json.dumps(header).encode()),
        _b64(json.dumps(payload or {}).encode()),
    ])
    signature = hmac.new(secret.encode(), signing_input.encode(), hashlib.sha256).digest()
    return f"{signing_input}.{_b64(signature)}"


def create_app(config: GateConfig, **middleware_kwargs) -> FastAPI:
    app = FastAPI()

    @app.get("/protected")
    async def protected():
        return {"message": "got through protection"}

    @app.get("/whoami")
    async def whoami(claims: dict = Depends(get_token_claims)):
        return {"claims": claims}

    @app.get("/health")
    async def health(claims: dict = Depends(require_token_claims)):
        return {"status": "ok"}

    app.add_middleware(JWTGateMiddleware, config=config, **middleware_kwargs)
    return app


@pytest.fixture
def config() -> GateConfig:
    return GateConfig(secret=SECRET.encode())


@pytest.fixture
def client(config) -> TestClient:
    return TestClient(create_app(config))
