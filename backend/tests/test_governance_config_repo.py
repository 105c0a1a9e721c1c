import os
import sys
from datetime import datetime, timedelta, timezone

import pytest

CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from northnode.core.contracts import GovernanceConfigRepo
from northnode.repos.governance_config_repo import SqlAlchemyGovernanceConfigRepo
from northnode.schemas.governance import GovernanceContext
from northnode.services.governance_engine import validate_content_with_context


def test_repo_satisfies_protocol(db_session):
    repo = SqlAlchemyGovernanceConfigRepo(db_session)
    assert isinstance(repo, GovernanceConfigRepo)


def test_repo_requires_session():
    with pytest.raises(TypeError):
        SqlAlchemyGovernanceConfigRepo(object())  # type: ignore[arg-type]


def test_create_and_get_profile(db_session):
    repo = SqlAlchemyGovernanceConfigRepo(db_session)
    profile = repo.create_profile(client_id=" client-1 ", name="Default", config={"enabled_policies": ["consent"]})
    assert profile.id
    assert profile.client_id == "client-1"

    fetched = repo.get_profile(profile.id)
    assert fetched is not None
    assert fetched.config == {"enabled_policies": ["consent"]}
    assert repo.get_profile("missing") is None


def test_create_profile_validates_input(db_session):
    repo = SqlAlchemyGovernanceConfigRepo(db_session)
    with pytest.raises(ValueError):
        repo.create_profile(client_id="  ", name="x")
    with pytest.raises(ValueError):
        repo.create_profile(client_id="c", name="")


def test_campaign_loads_its_profile(db_session):
    repo = SqlAlchemyGovernanceConfigRepo(db_session)
    profile = repo.create_profile(client_id="client-1", name="Default")
    campaign = repo.create_campaign(
        client_id="client-1",
        governance_profile_id=profile.id,
        name="Spring launch",
        config={"disabled_policies": ["consent"]},
    )

    fetched = repo.get_campaign(campaign.id)
    assert fetched is not None
    assert fetched.governance_profile_id == profile.id
    assert fetched.governance_profile.id == profile.id
    assert repo.get_campaign("missing") is None


def test_latest_active_profile(db_session):
    repo = SqlAlchemyGovernanceConfigRepo(db_session)
    older = repo.create_profile(client_id="client-1", name="Older")
    newer = repo.create_profile(client_id="client-1", name="Newer")
    inactive = repo.create_profile(client_id="client-1", name="Inactive", is_active=False)

    now = datetime.now(timezone.utc)
    older.updated_at = now - timedelta(days=2)
    newer.updated_at = now - timedelta(days=1)
    inactive.updated_at = now
    db_session.commit()

    latest = repo.get_latest_active_profile("client-1")
    assert latest is not None and latest.id == newer.id
    assert repo.get_latest_active_profile("client-2") is None


def test_contextual_validation_against_database(db_session):
    repo = SqlAlchemyGovernanceConfigRepo(db_session)
    profile = repo.create_profile(
        client_id="client-1",
        name="Strict",
        config={
            "enabledPolicies": ["stigma-language"],
            "customPatterns": [{"id": "no-miracle", "pattern": "miracle", "explanation": "Avoid miracle language"}],
        },
    )
    campaign = repo.create_campaign(client_id="client-1", governance_profile_id=profile.id, name="Awareness")

    result = validate_content_with_context(
        "A miracle for every addict.", GovernanceContext(campaign_id=campaign.id), repo
    )
    assert [v.policy_id for v in result.violations] == ["custom-patterns", "stigma-language"]
    assert result.profile_id == profile.id
    assert result.client_id == "client-1"

    by_client = validate_content_with_context("A miracle for every addict.", GovernanceContext(client_id="client-1"), repo)
    assert by_client.profile_id == profile.id
