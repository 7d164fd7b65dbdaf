from aws_cdk import Stack, aws_ec2 as ec2
from constructs import Construct

from common import constants


class Network(Construct):

    def __init__(self, scope: Stack, construct_id: str) -> None:
        super().__init__(scope, construct_id)

        self._vpc = self.create_vpc()

    @property
    def default_vpc(self) -> ec2.Vpc:
        return self._vpc

    def create_vpc(self) -> ec2.Vpc:
        """Isolated VPC hosting the database tier, no internet egress."""
        vpc = ec2.Vpc(
            self,
            "PomiTrackerVpc",
            max_azs=constants.MAX_AZS,
            vpc_name=constants.VPC_NAME,
            ip_addresses=ec2.IpAddresses.cidr(constants.VPC_CIDR),
            nat_gateways=0,
            subnet_configuration=[
                ec2.SubnetConfiguration(
                    name=constants.DATABASE_SUBNET_NAME,
                    subnet_type=ec2.SubnetType.PRIVATE_ISOLATED,
                    cidr_mask=constants.DATABASE_CIDR_MASK,
                ),
            ],
        )
        return vpc
