#!/usr/bin/env python3
"""AWS CDK entrypoint for provisioning the PomiTracker infrastructure.

This module wires the network and identity units into a single stack deployed
to the CDK CLI's default environment. Google credentials, the Cognito domain
prefix, the sender address and the redirect URI are CloudFormation parameters
supplied at deploy time, e.g.

    cdk deploy --parameters googleClientId=... --parameters redirectUri=...
"""
import os

import aws_cdk as cdk
from aws_cdk import Environment

from common import constants
from pomi_tracker.pomi_tracker_stack import PomiTrackerStack

app = cdk.App()

env = Environment(
    account=os.getenv("CDK_DEFAULT_ACCOUNT"),
    region=os.getenv("CDK_DEFAULT_REGION"),
)

PomiTrackerStack(app, constants.STACK_NAME, env=env)

app.synth()
