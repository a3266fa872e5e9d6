from .dynamodb import create_dynamodb_resource as create_dynamodb_resource
from .settings import Settings as Settings
