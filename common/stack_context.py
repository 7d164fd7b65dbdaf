from attrs import define
from aws_cdk import Stack

import common.constants as constants


@define(slots=True, frozen=True)
class StackContext:
    scope: Stack

    @property
    def aws_region(self) -> str:
        return Stack.of(self.scope).region

    # ---------- hosted ui ----------
    def build_cognito_host(self, domain_prefix: str) -> str:
        region = self.aws_region
        if not region:
            raise ValueError(
                "AWS region is not set, unable to resolve Cognito hosted UI domain"
            )
        return constants.COGNITO_AUTH_HOST.format(domain=domain_prefix, region=region)

    def build_cognito_authorize_url(
        self, domain_prefix: str, client_id: str, redirect_uri: str
    ) -> str:
        """Build the hosted UI authorize URL for an app client.

        Example:
            pomi.auth.eu-central-1.amazoncognito.com/oauth2/authorize?client_id=abc
            &response_type=code&scope=email+openid+profile&redirect_uri=https://app/cb
        """
        return (
            f"{self.build_cognito_host(domain_prefix)}{constants.OAUTH_AUTHORIZE_PATH}"
            f"?client_id={client_id}"
            f"&response_type={constants.OAUTH_RESPONSE_TYPE}"
            f"&scope={constants.OAUTH_SCOPE}"
            f"&redirect_uri={redirect_uri}"
        )
