import json

import boto3
import pytest
from moto import mock_aws

from identity.client_secret import (
    ClientSecretResult,
    StackOutputsNotFoundError,
    fetch_client_secret,
    main,
    read_stack_outputs,
)

REGION = "eu-central-1"


@pytest.fixture
def aws_credentials(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", REGION)
    monkeypatch.delenv("AWS_ENDPOINT_URL", raising=False)


@pytest.fixture
def cognito(aws_credentials):
    with mock_aws():
        yield boto3.client("cognito-idp", region_name=REGION)


@pytest.fixture
def user_pool_id(cognito) -> str:
    return cognito.create_user_pool(PoolName="PomiTrackerUserPool")["UserPool"]["Id"]


def _create_client(cognito, user_pool_id: str, generate_secret: bool) -> dict:
    return cognito.create_user_pool_client(
        UserPoolId=user_pool_id,
        ClientName="webClientPomiTracker",
        GenerateSecret=generate_secret,
    )["UserPoolClient"]


def _create_stack(user_pool_id: str, client_id: str) -> None:
    template = {
        "Resources": {"Queue": {"Type": "AWS::SQS::Queue"}},
        "Outputs": {
            "PomiTrackerClientUserPoolID": {"Value": user_pool_id},
            "ClientId": {"Value": client_id},
        },
    }
    boto3.client("cloudformation", region_name=REGION).create_stack(
        StackName="pomitrackerinfra", TemplateBody=json.dumps(template)
    )


# -------------------- fetch_client_secret ----------------------------


def test_fetch_client_secret(cognito, user_pool_id: str):
    client = _create_client(cognito, user_pool_id, generate_secret=True)

    result = fetch_client_secret(user_pool_id, client["ClientId"], cognito_client=cognito)

    assert result == ClientSecretResult(
        ok=True, client_id=client["ClientId"], client_secret=client["ClientSecret"]
    )


def test_fetch_client_secret_without_secret(cognito, user_pool_id: str):
    client = _create_client(cognito, user_pool_id, generate_secret=False)

    result = fetch_client_secret(user_pool_id, client["ClientId"], cognito_client=cognito)

    assert not result.ok
    assert result.error_code == "NoClientSecret"
    assert result.client_secret is None


def test_fetch_client_secret_unknown_client(cognito, user_pool_id: str):
    result = fetch_client_secret(user_pool_id, "unknown-client", cognito_client=cognito)

    assert not result.ok
    assert result.error_code == "ResourceNotFoundException"
    assert result.status_code == 400
    assert result.client_secret is None


# -------------------- read_stack_outputs ----------------------------


def test_read_stack_outputs(cognito, user_pool_id: str):
    client = _create_client(cognito, user_pool_id, generate_secret=True)
    _create_stack(user_pool_id, client["ClientId"])

    outputs = read_stack_outputs(
        "pomitrackerinfra",
        cloudformation_client=boto3.client("cloudformation", region_name=REGION),
    )

    assert outputs["PomiTrackerClientUserPoolID"] == user_pool_id
    assert outputs["ClientId"] == client["ClientId"]


def test_read_stack_outputs_missing_stack(cognito):
    with pytest.raises(StackOutputsNotFoundError):
        read_stack_outputs(
            "missing-stack",
            cloudformation_client=boto3.client("cloudformation", region_name=REGION),
        )


# -------------------- CLI ----------------------------


def test_main_prints_client_secret(cognito, user_pool_id: str, capsys):
    client = _create_client(cognito, user_pool_id, generate_secret=True)
    _create_stack(user_pool_id, client["ClientId"])

    exit_code = main(["--stack-name", "pomitrackerinfra", "--region", REGION])

    assert exit_code == 0
    assert capsys.readouterr().out.strip().splitlines()[-1] == client["ClientSecret"]


def test_main_fails_for_missing_stack(cognito):
    exit_code = main(["--stack-name", "missing-stack", "--region", REGION])

    assert exit_code == 1


def test_main_fails_when_outputs_are_missing(cognito):
    boto3.client("cloudformation", region_name=REGION).create_stack(
        StackName="pomitrackerinfra",
        TemplateBody=json.dumps({"Resources": {"Queue": {"Type": "AWS::SQS::Queue"}}}),
    )

    exit_code = main(["--stack-name", "pomitrackerinfra", "--region", REGION])

    assert exit_code == 1
