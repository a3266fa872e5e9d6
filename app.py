#!/usr/bin/env python3

import aws_cdk as cdk

from skyswift_stack import SkySwiftStack

app = cdk.App()
SkySwiftStack(
    app,
    "SkySwiftStack",
)

app.synth()
