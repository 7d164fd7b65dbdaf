from aws_cdk import Stack
from constructs import Construct

from identity.cognito import Cognito
from networking.network import Network


class PomiTrackerStack(Stack):

    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Isolated VPC for the database tier
        self.network = Network(self, "PomiTrackerNetwork")

        # Cognito user pool federated with Google, app client and hosted UI
        self.identity = Cognito(self)
