"""Tests for the ORM tables against a throwaway SQLite database."""

from __future__ import annotations

from datetime import date

import pytest
import pytest_asyncio
from sqlalchemy import inspect, select
from sqlalchemy.exc import IntegrityError

from swc_shared import orm
from swc_shared.db import Base, dispose_engine, get_engine, get_sessionmaker, init_db, ping


@pytest_asyncio.fixture()
async def session(database_url):
    await init_db()
    async with get_sessionmaker()() as s:
        yield s
    await dispose_engine()


def _site(**overrides) -> orm.Site:
    values = {
        "name": "Arid Region Test Site",
        "slope_class": "STEEP",
        "soil_texture": "SANDY",
        "land_use": "PASTURE",
        "drainage": "WELL",
        "rainfall_band": "ARID",
        "gully_state": "MODERATE",
    }
    values.update(overrides)
    return orm.Site(**values)


@pytest.mark.asyncio
async def test_init_db_creates_every_table(database_url):
    await init_db()
    await init_db()
    async with get_engine().connect() as conn:
        names = await conn.run_sync(lambda c: set(inspect(c).get_table_names()))
    await dispose_engine()
    assert names == set(Base.metadata.tables)
    assert {t.__tablename__ for t in orm.DELETE_ORDER} == names


@pytest.mark.asyncio
async def test_ping(database_url):
    assert await ping() is True
    await dispose_engine()


@pytest.mark.asyncio
async def test_ids_and_timestamps_are_generated(session):
    site = _site()
    session.add(site)
    await session.commit()

    assert len(site.id) == 36
    assert site.created_at is not None
    assert site.updated_at is not None
    assert site.technical_specs == {}


@pytest.mark.asyncio
async def test_json_columns_round_trip(session):
    notes = {"hazards": ["flash floods", "rock falls"], "mitigations": ["early warning system"]}
    site = _site(technical_specs={"elevation": 1200, "soilDepth": 0.8}, safety_notes=notes)
    session.add(site)
    await session.commit()
    site_id = site.id
    session.expunge_all()

    loaded = (await session.execute(select(orm.Site).where(orm.Site.id == site_id))).scalar_one()
    assert loaded.safety_notes == notes
    assert loaded.technical_specs["soilDepth"] == 0.8


@pytest.mark.asyncio
async def test_foreign_keys_are_enforced(session):
    session.add(orm.Metric(
        site_id="no-such-site", name="Runoff", unit="mm", value=1.0,
        measured_date=date(2024, 1, 20),
    ))
    with pytest.raises(IntegrityError):
        await session.commit()


@pytest.mark.asyncio
async def test_technique_code_is_unique(session):
    session.add(orm.Technique(code="TECH-001", name="Half Moon"))
    await session.commit()
    session.add(orm.Technique(code="TECH-001", name="Another"))
    with pytest.raises(IntegrityError):
        await session.commit()


@pytest.mark.asyncio
async def test_site_technique_pair_is_unique(session):
    site = _site()
    technique = orm.Technique(code="TECH-001", name="Half Moon")
    session.add_all([site, technique])
    await session.commit()

    session.add(orm.SiteTechnique(site_id=site.id, technique_id=technique.id))
    await session.commit()
    session.add(orm.SiteTechnique(site_id=site.id, technique_id=technique.id, status="ACTIVE"))
    with pytest.raises(IntegrityError):
        await session.commit()
