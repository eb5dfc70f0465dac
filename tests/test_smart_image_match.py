import json
import os
import random
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'QOTD-Backend', 'lambda'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from quote_keywords import FALLBACK_IMAGES, hash_content
from smart_image_match import smart_image_match as sim
from smart_image_match.image_inventory import ImageInventory
from smart_image_match.match_cache import MatchCache
from fake_dynamodb import FakeTable, client_error, image

SCENARIO_TEXT = 'The cat sat in the sunshine and dreamed of success'


@pytest.fixture
def stores(monkeypatch):
    """Wire the handler to in-memory image and cache tables."""
    images = FakeTable([
        image('cat-1', mood='serene', keywords=['cat', 'nature']),
        image('succ-1', mood='peaceful', keywords=['success']),
        image('plain-1', mood='serene', keywords=['landscape']),
        image('joke-1', category='jokes', mood='playful', keywords=['laugh']),
    ])
    cache = FakeTable(key_names=('content_hash', 'category'))
    monkeypatch.setattr(sim, 'ImageInventory', lambda: ImageInventory(table=images))
    monkeypatch.setattr(sim, 'MatchCache', lambda: MatchCache(table=cache))
    return images, cache


def post(body):
    return {'httpMethod': 'POST', 'body': json.dumps(body) if not isinstance(body, str) else body}


def test_options_preflight():
    resp = sim.lambda_handler({'httpMethod': 'OPTIONS'}, None)
    assert resp['statusCode'] == 200
    assert resp['body'] == ''
    assert resp['headers']['Access-Control-Allow-Origin'] == '*'
    assert 'DELETE' in resp['headers']['Access-Control-Allow-Methods']


def test_missing_fields_return_400(stores):
    for body in ({'category': 'quotes'}, {'contentText': 'hi'}, {'contentText': '', 'category': 'quotes'}):
        resp = sim.lambda_handler(post(body), None)
        assert resp['statusCode'] == 400
        assert 'error' in json.loads(resp['body'])


def test_invalid_json_returns_400(stores):
    resp = sim.lambda_handler(post('{not json'), None)
    assert resp['statusCode'] == 400


def test_match_then_cached(stores):
    images, cache = stores
    first = sim.lambda_handler(post({'contentText': SCENARIO_TEXT, 'category': 'quotes'}), None)
    assert first['statusCode'] == 200
    body1 = json.loads(first['body'])
    assert body1['success'] is True
    assert body1['cached'] is False
    ids1 = [img['id'] for img in body1['images']]
    assert ids1 == ['cat-1', 'succ-1']
    assert body1['count'] == 2

    second = sim.lambda_handler(post({'contentText': SCENARIO_TEXT, 'category': 'quotes'}), None)
    body2 = json.loads(second['body'])
    assert body2['cached'] is True
    assert [img['id'] for img in body2['images']] == ids1
    assert cache.items[0]['content_hash'] == hash_content(SCENARIO_TEXT)


def test_provided_hash_is_used(stores):
    _, cache = stores
    sim.lambda_handler(post({'contentText': SCENARIO_TEXT, 'category': 'quotes', 'contentHash': 'hash_custom'}), None)
    assert cache.items[0]['content_hash'] == 'hash_custom'


def test_no_match_falls_back_to_category_sample(stores):
    resp = sim.lambda_handler(post({'contentText': 'Quantum chromodynamics explained', 'category': 'jokes'}), None)
    body = json.loads(resp['body'])
    assert [img['id'] for img in body['images']] == ['joke-1']


def test_empty_store_returns_empty_list_and_skips_cache(monkeypatch):
    cache = FakeTable(key_names=('content_hash', 'category'))
    monkeypatch.setattr(sim, 'ImageInventory', lambda: ImageInventory(table=FakeTable()))
    monkeypatch.setattr(sim, 'MatchCache', lambda: MatchCache(table=cache))
    resp = sim.lambda_handler(post({'contentText': SCENARIO_TEXT, 'category': 'quotes'}), None)
    body = json.loads(resp['body'])
    assert resp['statusCode'] == 200
    assert body['count'] == 0 and body['images'] == []
    assert cache.puts == []


def test_cache_failures_do_not_fail_request(monkeypatch, stores):
    images, _ = stores
    broken = FakeTable(key_names=('content_hash', 'category'), error=client_error())
    monkeypatch.setattr(sim, 'MatchCache', lambda: MatchCache(table=broken))
    resp = sim.lambda_handler(post({'contentText': SCENARIO_TEXT, 'category': 'quotes'}), None)
    body = json.loads(resp['body'])
    assert resp['statusCode'] == 200
    assert body['cached'] is False
    assert body['count'] == 2


def test_unexpected_error_returns_500(monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError('kaboom')
    monkeypatch.setattr(sim, 'match_images', boom)
    resp = sim.lambda_handler(post({'contentText': 'x', 'category': 'quotes'}), None)
    assert resp['statusCode'] == 500
    body = json.loads(resp['body'])
    assert body['details'] == 'kaboom'
    assert 'error' in body


def test_dict_body_and_http_api_event(stores):
    event = {'requestContext': {'http': {'method': 'POST'}},
             'body': {'contentText': SCENARIO_TEXT, 'category': 'quotes'}}
    resp = sim.lambda_handler(event, None)
    assert resp['statusCode'] == 200


def test_match_images_empty_text_uses_default_moods():
    images = FakeTable([image('q1', mood='serene'), image('q2', mood='gritty')])
    result = sim.match_images('', 'quotes', inventory=ImageInventory(table=images),
                              cache=MatchCache(table=FakeTable(key_names=('content_hash', 'category'))))
    assert result['keywords'] == []
    assert result['content_hash'] == 'hash_0'
    assert [img['id'] for img in result['images']] == ['q1']


def test_match_images_stale_cache_recomputes():
    images = FakeTable([image('cat-1', keywords=['cat'])])
    cache = FakeTable([{'content_hash': hash_content(SCENARIO_TEXT), 'category': 'quotes',
                        'matched_image_ids': ['gone']}], key_names=('content_hash', 'category'))
    result = sim.match_images(SCENARIO_TEXT, 'quotes', inventory=ImageInventory(table=images),
                              cache=MatchCache(table=cache))
    assert result['cached'] is False
    assert [img['id'] for img in result['images']] == ['cat-1']


def test_resolve_background_url_always_returns_url():
    url = sim.resolve_background_url(SCENARIO_TEXT, 'quotes', rng=random.Random(3),
                                     inventory=ImageInventory(table=FakeTable()),
                                     cache=MatchCache(table=FakeTable(key_names=('content_hash', 'category'))))
    assert url in FALLBACK_IMAGES


def test_non_string_fields_return_400(stores):
    resp = sim.lambda_handler(post({'contentText': 'hi', 'category': ['quotes']}), None)
    assert resp['statusCode'] == 400


def test_null_request_context_is_tolerated(stores):
    event = {'requestContext': None, 'body': {'contentText': SCENARIO_TEXT, 'category': 'quotes'}}
    resp = sim.lambda_handler(event, None)
    assert resp['statusCode'] == 200
