"""
Pytest fixtures for the landing composer.

This module provides:
1. A Flask app on in-memory SQLite, with tables created per test
2. A test client
3. Tenants and admin JWT headers
4. A restaurant stand-in for composer tests (see fakes.py for stores)
"""
from types import SimpleNamespace
from typing import Dict

import pytest
from flask_jwt_extended import create_access_token

from landing import create_app
from landing.application.sections import SqlSectionStore
from landing.catalog import default_catalog
from landing.extensions import db
from landing.models import Tenant


# ==================== APP / DATABASE ====================

@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def catalog():
    return default_catalog()


@pytest.fixture
def store(app, catalog):
    return SqlSectionStore(catalog)


# ==================== TENANTS / AUTH ====================

def make_tenant(name: str, slug: str, **kwargs) -> Tenant:
    tenant = Tenant(name=name, slug=slug, **kwargs)
    db.session.add(tenant)
    db.session.commit()
    return tenant


@pytest.fixture
def tenant(app):
    return make_tenant(
        "Casa Lucía",
        "casa-lucia",
        description="Cocina de mercado",
        default_language="es",
    )


@pytest.fixture
def other_tenant(app):
    return make_tenant("Trattoria Roma", "trattoria-roma", default_language="it")


def admin_headers(tenant, role: str = "admin") -> Dict[str, str]:
    token = create_access_token(
        identity="user-1",
        additional_claims={"tenant_id": tenant.id, "role": role},
    )
    return {
        "Authorization": f"Bearer {token}",
        "X-Tenant-ID": tenant.id,
    }


@pytest.fixture
def auth_headers(tenant):
    return admin_headers(tenant)


@pytest.fixture
def staff_headers(tenant):
    return admin_headers(tenant, role="staff")


# ==================== STAND-INS ====================

@pytest.fixture
def restaurant():
    return SimpleNamespace(
        id="t1",
        name="Casa Lucía",
        slug="casa-lucia",
        description="Cocina de mercado",
        logo_url="mediabucket/logo.png",
        cover_image_url="https://cdn.example.com/cover.jpg",
        theme={"primary": "#D6AA52"},
        default_language="es",
    )
