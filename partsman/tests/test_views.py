"""Tests for the JSON listing endpoints."""

import uuid

import pytest
from django.urls import reverse


pytestmark = pytest.mark.django_db


class TestItemList:
    def test_payload_shape(self, client, gaming_pc):
        response = client.get(reverse("partsman:item-list"))
        assert response.status_code == 200
        assert response.json() == [
            {
                "id": str(gaming_pc.uuid),
                "name": "Ultimate Gaming Beast",
                "category": "gaming-pc",
                "description": "High-end build",
                "specs": {"CPU": "AMD Ryzen 7", "Graphics Card": "RTX 4070"},
                "price": 2499.99,
                "imageUrl": "/images/beast.png",
                "stock": 2,
            }
        ]

    def test_category_prefilter(self, client, cpu_item, gaming_pc, office_pc):
        response = client.get(reverse("partsman:item-list"), {"category": "pc"})
        assert [item["name"] for item in response.json()] == ["Office Productivity PC", "Ultimate Gaming Beast"]

    def test_unpublished_hidden(self, client, hidden_item):
        assert client.get(reverse("partsman:item-list")).json() == []

    def test_post_not_allowed(self, client):
        assert client.post(reverse("partsman:item-list")).status_code == 405


class TestItemDetail:
    def test_found(self, client, cpu_item):
        response = client.get(reverse("partsman:item-detail", args=[str(cpu_item.uuid)]))
        assert response.status_code == 200
        assert response.json()["specs"]["cores"] == "8"

    def test_not_found(self, client, db):
        missing = str(uuid.uuid4())
        response = client.get(reverse("partsman:item-detail", args=[missing]))
        assert response.status_code == 404
        assert response.json() == {
            "code": "ITEM_NOT_FOUND",
            "message": "Catalog item not found",
            "data": {"item_id": missing},
        }

    def test_malformed_id(self, client, db):
        assert client.get(reverse("partsman:item-detail", args=["42"])).status_code == 404


class TestFilterGroups:
    def test_cpu(self, client):
        response = client.get(reverse("partsman:filter-groups", args=["cpu"]))
        groups = response.json()
        assert groups[0] == {
            "title": "price",
            "type": "range",
            "label": "Price",
            "range": {"min": 0, "max": 5000, "step": 10, "unit": "€"},
        }
        assert groups[1]["type"] == "radio"

    def test_unknown_category(self, client):
        response = client.get(reverse("partsman:filter-groups", args=["toaster"]))
        assert [group["title"] for group in response.json()] == ["price"]
