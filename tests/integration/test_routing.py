"""Integration tests for the versioned URL layout.

Products and orders share the ``api/v1/`` prefix; each module's router
only contributes its own resource routes.
"""

from __future__ import annotations

import pytest
from django.urls import reverse

pytestmark = pytest.mark.integration


class TestApiV1Routes:
    @pytest.mark.parametrize(
        "name, path",
        [("product-list", "/api/v1/products/"), ("order-list", "/api/v1/orders/")],
    )
    def test_resource_routes_resolve(self, api_client, name, path):
        assert reverse(name) == path
        assert api_client.get(path).status_code == 200

    def test_no_shared_api_root(self, api_client):
        response = api_client.get("/api/v1/")
        assert response.status_code == 404
