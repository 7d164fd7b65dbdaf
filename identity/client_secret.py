"""Post-deployment lookup of the web app client secret.

CloudFormation never returns a generated Cognito client secret. The stack
reads it once through a custom resource; this module is the explicit query
step for operators who need it again after deployment:

    pomi-client-secret --stack-name pomitrackerinfra --region eu-central-1
"""
import argparse
import os
from typing import Any, Optional, Sequence

import boto3
from attrs import define, field
from attrs.validators import instance_of, optional
from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError

import common.constants as constants

logger: Logger = Logger(
    service="pomi-client-secret", level=os.getenv("LOG_LEVEL", "INFO").upper()
)


class StackOutputsNotFoundError(LookupError):
    """Raised when the stack or one of its required outputs does not exist."""


@define(slots=True, kw_only=True, frozen=True)
class ClientSecretResult:
    ok: bool = field(validator=instance_of(bool))
    client_id: str = field(validator=instance_of(str))
    client_secret: Optional[str] = field(
        default=None, validator=optional(instance_of(str))
    )
    error_code: Optional[str] = None
    error_message: Optional[str] = None
    status_code: Optional[int] = None


def _error_result(client_id: str, e: ClientError) -> ClientSecretResult:
    response = e.response or {}
    error_info = response.get("Error", {})
    meta_data = response.get("ResponseMetadata", {})
    return ClientSecretResult(
        ok=False,
        client_id=client_id,
        error_code=error_info.get("Code", "Unknown"),
        error_message=error_info.get("Message", "Unknown"),
        status_code=meta_data.get("HTTPStatusCode", 500),
    )


def read_stack_outputs(
    stack_name: str, cloudformation_client: Any = None
) -> dict[str, str]:
    client = cloudformation_client or boto3.client("cloudformation")
    try:
        response = client.describe_stacks(StackName=stack_name)
    except ClientError as e:
        # DescribeStacks reports a missing stack as a ValidationError
        if e.response.get("Error", {}).get("Code") == "ValidationError":
            raise StackOutputsNotFoundError(
                f"Stack {stack_name} does not exist"
            ) from e
        raise

    stacks = response.get("Stacks", [])
    if not stacks:
        raise StackOutputsNotFoundError(f"Stack {stack_name} does not exist")
    return {
        output["OutputKey"]: output["OutputValue"]
        for output in stacks[0].get("Outputs", [])
    }


def fetch_client_secret(
    user_pool_id: str, client_id: str, cognito_client: Any = None
) -> ClientSecretResult:
    client = cognito_client or boto3.client("cognito-idp")
    try:
        response = client.describe_user_pool_client(
            UserPoolId=user_pool_id, ClientId=client_id
        )
    except ClientError as e:
        logger.error(
            "Failed to describe user pool client",
            user_pool_id=user_pool_id,
            client_id=client_id,
        )
        return _error_result(client_id, e)

    client_secret = response["UserPoolClient"].get("ClientSecret")
    if not client_secret:
        logger.warning("User pool client has no secret", client_id=client_id)
        return ClientSecretResult(
            ok=False,
            client_id=client_id,
            error_code="NoClientSecret",
            error_message=f"Client {client_id} was created without a secret",
        )

    logger.info("Successfully retrieved client secret", client_id=client_id)
    return ClientSecretResult(ok=True, client_id=client_id, client_secret=client_secret)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Print the PomiTracker web app client secret"
    )
    parser.add_argument("--stack-name", default=constants.STACK_NAME)
    parser.add_argument(
        "--region",
        default=os.getenv("AWS_REGION", os.getenv("CDK_DEFAULT_REGION", constants.DEFAULT_REGION)),
    )
    args = parser.parse_args(argv)

    try:
        outputs = read_stack_outputs(
            args.stack_name,
            cloudformation_client=boto3.client("cloudformation", region_name=args.region),
        )
        user_pool_id = outputs[constants.OUTPUT_USER_POOL_ID]
        client_id = outputs[constants.OUTPUT_CLIENT_ID]
    except (StackOutputsNotFoundError, KeyError) as e:
        logger.error("Unable to read stack outputs", stack=args.stack_name, error=str(e))
        return 1

    result = fetch_client_secret(
        user_pool_id,
        client_id,
        cognito_client=boto3.client("cognito-idp", region_name=args.region),
    )
    if not result.ok:
        logger.error(
            "Client secret lookup failed",
            error_code=result.error_code,
            error_message=result.error_message,
            status_code=result.status_code,
        )
        return 1

    print(result.client_secret)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
