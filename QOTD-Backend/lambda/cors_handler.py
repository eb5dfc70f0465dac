#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CORS handler for API Gateway OPTIONS requests on the smart-image-match route.
Returns the same CORS headers the match function sends.
"""

from smart_image_match.smart_image_match import CORS_HEADERS


def lambda_handler(event, context):
    """
    Handle CORS preflight OPTIONS requests.
    """
    return {
        "statusCode": 200,
        "headers": {**CORS_HEADERS, "Access-Control-Max-Age": "86400"},
        "body": ""
    }
