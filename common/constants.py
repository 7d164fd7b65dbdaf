DEFAULT_REGION = "eu-central-1"
STACK_NAME = "pomitrackerinfra"

VPC_NAME = "PomiTrackerVpc"
VPC_CIDR = "124.0.0.0/16"
MAX_AZS = 2
DATABASE_SUBNET_NAME = "database"
DATABASE_CIDR_MASK = 20

USER_POOL_NAME = "PomiTrackerUserPool"
PASSWORD_MIN_LENGTH = 8
VERIFICATION_EMAIL_SUBJECT = "Verify your email for PomiTracker !"
VERIFICATION_EMAIL_BODY = (
    "Thanks for signing up to PomiTracker! Your verification code is {####}"
)
GOOGLE_PROVIDER_SCOPES = ["openid", "email", "profile"]
APP_CLIENT_ID = "webClientPomiTracker"
USER_POOL_DOMAIN_ID = "PomiTrackerUserPoolDomain"

# Hosted UI authorize endpoint
COGNITO_AUTH_HOST = "{domain}.auth.{region}.amazoncognito.com"
OAUTH_AUTHORIZE_PATH = "/oauth2/authorize"
OAUTH_RESPONSE_TYPE = "code"
OAUTH_SCOPE = "email+openid+profile"

# Custom resource used to read the generated client secret
DESCRIBE_CLIENT_RESOURCE_TYPE = "Custom::DescribeCognitoUserPoolClient"
DESCRIBE_CLIENT_SERVICE = "CognitoIdentityServiceProvider"
DESCRIBE_CLIENT_ACTION = "describeUserPoolClient"
CLIENT_SECRET_RESPONSE_FIELD = "UserPoolClient.ClientSecret"

# Deployment parameter names
PARAM_GOOGLE_CLIENT_ID = "googleClientId"
PARAM_GOOGLE_CLIENT_SECRET = "googleClientSecret"
PARAM_COGNITO_DOMAIN = "cognitoDomain"
PARAM_COGNITO_SENDER_MAIL = "cognitoSenderMail"
PARAM_REDIRECT_URI = "redirectUri"

# Stack output names
OUTPUT_USER_POOL_ID = "PomiTrackerClientUserPoolID"
OUTPUT_COGNITO_URL = "PomiTrackerCognitoUrl"
OUTPUT_CLIENT_ID = "ClientId"
OUTPUT_CLIENT_SECRET = "UserPoolClientSecret"
