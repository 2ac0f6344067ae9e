"""
Pytest configuration - shared typed-data fixtures.
The Mail/Person example is the reference message from EIP-712.
"""

import pytest

MAIL_TYPES = {
    "EIP712Domain": [
        {"name": "name", "type": "string"},
        {"name": "version", "type": "string"},
        {"name": "chainId", "type": "uint256"},
        {"name": "verifyingContract", "type": "address"},
    ],
    "Person": [
        {"name": "name", "type": "string"},
        {"name": "wallet", "type": "address"},
    ],
    "Mail": [
        {"name": "from", "type": "Person"},
        {"name": "to", "type": "Person"},
        {"name": "contents", "type": "string"},
    ],
}

MAIL_DOMAIN = {
    "name": "Ether Mail",
    "version": "1",
    "chainId": "1",
    "verifyingContract": "0xCcCCccccCCCCcCCCCCCcCcCccCcCCCcCcccccccC",
}

MAIL_MESSAGE = {
    "from": {"name": "Cow", "wallet": "0xCD2a3d9F938E13CD947Ec05AbC7FE734Df8DD826"},
    "to": {"name": "Bob", "wallet": "0xbBbBBBBbbBBBbbbBbbBbbbbBBbBbbbbBbBbbBBbB"},
    "contents": "Hello, Bob!",
}


@pytest.fixture
def mail_types():
    return MAIL_TYPES


@pytest.fixture
def mail_domain():
    return MAIL_DOMAIN


@pytest.fixture
def mail_message():
    return MAIL_MESSAGE


@pytest.fixture
def mail_document():
    """Full typed-data document in wallet JSON form."""
    return {
        "primaryType": "Mail",
        "types": MAIL_TYPES,
        "domain": MAIL_DOMAIN,
        "message": MAIL_MESSAGE,
    }


@pytest.fixture
def person_types():
    return {
        "EIP712Domain": [
            {"name": "name", "type": "string"},
            {"name": "version", "type": "string"},
        ],
        "Person": [
            {"name": "name", "type": "string"},
            {"name": "wallet", "type": "address"},
        ],
    }


@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch):
    """Keep the developer's signer key out of tests."""
    from typed_digest.config import settings

    monkeypatch.setattr(settings, "TYPED_DIGEST_PRIVATE_KEY", "")
    yield


# Pytest configuration
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "vectors: golden test vectors from published examples")
    config.addinivalue_line("markers", "crosscheck: compares against an independent EIP-712 implementation")
