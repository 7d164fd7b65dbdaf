from aws_cdk import (
    CfnOutput,
    CfnParameter,
    Duration,
    RemovalPolicy,
    SecretValue,
    Stack,
    aws_cognito as cognito,
    custom_resources as cr,
)
from constructs import Construct

import common.constants as constants
from common.stack_context import StackContext


class Cognito(Construct):
    """Cognito user pool federated with Google, plus its web app client.

    Deployment parameters and outputs are declared on the parent stack so
    their logical names stay stable regardless of where this construct sits
    in the tree.
    """

    def __init__(self, parent: Stack, construct_id: str = "PomiTrackerCognito") -> None:
        super().__init__(parent, construct_id)
        self.parent = parent
        self.context = StackContext(scope=parent)

        # Deployment parameters
        self.google_client_id = self._build_string_parameter(
            constants.PARAM_GOOGLE_CLIENT_ID,
            "Enter the Google Client Id for the Cognito Connection",
        )
        self.google_client_secret_parameter = CfnParameter(
            parent,
            constants.PARAM_GOOGLE_CLIENT_SECRET,
            type="String",
            description="Enter the Google Client Secret for the Cognito Connection",
            no_echo=True,
        )
        self.cognito_domain = self._build_string_parameter(
            constants.PARAM_COGNITO_DOMAIN, "Domain Prefix for Cognito"
        )
        self.cognito_sender_mail = self._build_string_parameter(
            constants.PARAM_COGNITO_SENDER_MAIL,
            "The Sendermail for Cognito for Password Reset etc.",
        )
        self.redirect_uri = self._build_string_parameter(
            constants.PARAM_REDIRECT_URI,
            "Specify the URL to your callback in the webapp",
        )

        self.user_pool = self._build_user_pool()

        # Constructing the provider registers it on the user pool
        self.google_provider = self._build_google_provider(self.user_pool)
        self.google_provider.apply_removal_policy(RemovalPolicy.DESTROY)

        self.app_client = self._build_app_client(self.user_pool)
        self.app_client.apply_removal_policy(RemovalPolicy.DESTROY)
        # The client lists Google as a supported provider, so it must not be
        # created before the provider exists.
        self.app_client.node.add_dependency(self.google_provider)

        self.user_pool_domain = self.user_pool.add_domain(
            constants.USER_POOL_DOMAIN_ID,
            cognito_domain=cognito.CognitoDomainOptions(
                domain_prefix=self.cognito_domain
            ),
        )
        self.sign_in_url = self.user_pool_domain.sign_in_url(
            self.app_client, redirect_uri=self.redirect_uri
        )

        self.client_secret = self._build_client_secret_lookup()
        self.cognito_url = self.context.build_cognito_authorize_url(
            domain_prefix=self.user_pool_domain.domain_name,
            client_id=self.app_client.user_pool_client_id,
            redirect_uri=self.redirect_uri,
        )

        CfnOutput(
            parent,
            constants.OUTPUT_USER_POOL_ID,
            value=self.user_pool.user_pool_id,
            description="The user pool id",
        )
        CfnOutput(
            parent,
            constants.OUTPUT_COGNITO_URL,
            value=self.cognito_url,
            description="Hosted UI authorize URL",
        )
        CfnOutput(
            parent,
            constants.OUTPUT_CLIENT_ID,
            value=self.app_client.user_pool_client_id,
            description="The web app client id",
        )
        CfnOutput(
            parent,
            constants.OUTPUT_CLIENT_SECRET,
            value=self.client_secret,
            description="The web app client secret",
        )

    # Resource creation

    def _build_string_parameter(self, name: str, description: str) -> str:
        return CfnParameter(
            self.parent, name, type="String", description=description
        ).value_as_string

    def _build_user_pool(self) -> cognito.UserPool:
        return cognito.UserPool(
            self,
            "PomiTrackerUserPool",
            user_pool_name=constants.USER_POOL_NAME,
            self_sign_up_enabled=True,
            sign_in_aliases=cognito.SignInAliases(email=True),
            standard_attributes=cognito.StandardAttributes(
                email=cognito.StandardAttribute(mutable=True, required=True),
            ),
            account_recovery=cognito.AccountRecovery.EMAIL_ONLY,
            mfa=cognito.Mfa.OPTIONAL,
            mfa_second_factor=cognito.MfaSecondFactor(otp=True, sms=False),
            password_policy=cognito.PasswordPolicy(
                min_length=constants.PASSWORD_MIN_LENGTH,
                require_symbols=True,
                require_digits=True,
                require_lowercase=True,
                require_uppercase=True,
                temp_password_validity=Duration.days(1),
            ),
            email=cognito.UserPoolEmail.with_cognito(self.cognito_sender_mail),
            user_verification=cognito.UserVerificationConfig(
                email_subject=constants.VERIFICATION_EMAIL_SUBJECT,
                email_body=constants.VERIFICATION_EMAIL_BODY,
                email_style=cognito.VerificationEmailStyle.CODE,
            ),
            removal_policy=RemovalPolicy.DESTROY,
        )

    def _build_google_provider(
        self, user_pool: cognito.IUserPool
    ) -> cognito.UserPoolIdentityProviderGoogle:
        return cognito.UserPoolIdentityProviderGoogle(
            self,
            "googleProvider",
            user_pool=user_pool,
            client_id=self.google_client_id,
            client_secret_value=SecretValue.cfn_parameter(
                self.google_client_secret_parameter
            ),
            scopes=constants.GOOGLE_PROVIDER_SCOPES,
            attribute_mapping=cognito.AttributeMapping(
                email=cognito.ProviderAttribute.GOOGLE_EMAIL,
                given_name=cognito.ProviderAttribute.GOOGLE_GIVEN_NAME,
                family_name=cognito.ProviderAttribute.GOOGLE_FAMILY_NAME,
                profile_picture=cognito.ProviderAttribute.GOOGLE_PICTURE,
                preferred_username=cognito.ProviderAttribute.GOOGLE_NAME,
            ),
        )

    def _build_app_client(self, user_pool: cognito.UserPool) -> cognito.UserPoolClient:
        return user_pool.add_client(
            constants.APP_CLIENT_ID,
            access_token_validity=Duration.days(1),
            id_token_validity=Duration.days(1),
            refresh_token_validity=Duration.days(1),
            generate_secret=True,
            o_auth=cognito.OAuthSettings(
                callback_urls=[self.redirect_uri],
                flows=cognito.OAuthFlows(authorization_code_grant=True),
                scopes=[
                    cognito.OAuthScope.EMAIL,
                    cognito.OAuthScope.OPENID,
                    cognito.OAuthScope.PROFILE,
                ],
            ),
            supported_identity_providers=[
                cognito.UserPoolClientIdentityProvider.GOOGLE,
                cognito.UserPoolClientIdentityProvider.COGNITO,
            ],
        )

    def _build_client_secret_lookup(self) -> str:
        """Read the generated client secret, which CloudFormation does not expose."""
        describe_client = cr.AwsCustomResource(
            self,
            "DescribeCognitoUserPoolClient",
            resource_type=constants.DESCRIBE_CLIENT_RESOURCE_TYPE,
            on_create=cr.AwsSdkCall(
                region=self.parent.region,
                service=constants.DESCRIBE_CLIENT_SERVICE,
                action=constants.DESCRIBE_CLIENT_ACTION,
                parameters={
                    "UserPoolId": self.user_pool.user_pool_id,
                    "ClientId": self.app_client.user_pool_client_id,
                },
                physical_resource_id=cr.PhysicalResourceId.of(
                    self.app_client.user_pool_client_id
                ),
            ),
            policy=cr.AwsCustomResourcePolicy.from_sdk_calls(
                resources=cr.AwsCustomResourcePolicy.ANY_RESOURCE
            ),
            install_latest_aws_sdk=False,
        )
        return describe_client.get_response_field(
            constants.CLIENT_SECRET_RESPONSE_FIELD
        )
