from __future__ import annotations

import pytest

from dynamode.agent import DEFAULT_ENDPOINT_URL, DEFAULT_REGION, get_settings
from dynamode.codec import STORE_MAX_DEPTH


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ("DYNAMODE_ENDPOINT_URL", "DYNAMODE_REGION", "DYNAMODE_MAX_DEPTH"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = get_settings()
    assert settings.endpoint_url == DEFAULT_ENDPOINT_URL
    assert settings.region == DEFAULT_REGION
    assert settings.max_depth == STORE_MAX_DEPTH
    assert settings.policy.max_depth == STORE_MAX_DEPTH


def test_env_overrides(clean_env):
    clean_env.setenv("DYNAMODE_ENDPOINT_URL", "http://dynamo:9000")
    clean_env.setenv("DYNAMODE_REGION", "eu-central-1")
    clean_env.setenv("DYNAMODE_MAX_DEPTH", "8")

    settings = get_settings()
    assert settings.endpoint_url == "http://dynamo:9000"
    assert settings.region == "eu-central-1"
    assert settings.policy.max_depth == 8


def test_empty_endpoint_means_aws_default(clean_env):
    clean_env.setenv("DYNAMODE_ENDPOINT_URL", "")
    assert get_settings().endpoint_url is None


def test_bad_max_depth(clean_env):
    clean_env.setenv("DYNAMODE_MAX_DEPTH", "deep")
    with pytest.raises(ValueError):
        get_settings()


@pytest.mark.parametrize("depth", ["0", "-3", "5000"])
def test_out_of_range_max_depth(clean_env, depth):
    clean_env.setenv("DYNAMODE_MAX_DEPTH", depth)
    with pytest.raises(ValueError):
        get_settings()
