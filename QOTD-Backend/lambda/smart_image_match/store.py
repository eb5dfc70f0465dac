"""DynamoDB access shared by the image inventory and the match cache."""
import os

import boto3
from botocore.config import Config

AWS_REGION = os.getenv('AWS_DEFAULT_REGION', 'us-east-1')

# One attempt only: a slow or failing store degrades to the fallback path
store_config = Config(
    connect_timeout=int(os.getenv('STORE_CONNECT_TIMEOUT', '5')),
    read_timeout=int(os.getenv('STORE_READ_TIMEOUT', '10')),
    retries={'max_attempts': 1, 'mode': 'standard'}
)


def get_table(table_name: str):
    """Return a boto3 DynamoDB Table resource configured with store timeouts."""
    dynamodb = boto3.resource('dynamodb', region_name=AWS_REGION, config=store_config)
    return dynamodb.Table(table_name)
