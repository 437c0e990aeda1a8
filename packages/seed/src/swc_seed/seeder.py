"""
seeder.py — populate the database with the sample records.

Groups are inserted strictly in foreign-key dependency order:

    techniques -> design templates -> maintenance templates -> materials
    -> sites -> site techniques -> designs -> design layers -> BOQs
    -> BOQ items -> metrics -> cost records

Rows inside a group go in concurrently; each group waits for the previous
one because its rows reference ids produced there.

Usage:
    from swc_seed.seeder import run
    result = await run()
    print(result.counts)
"""

from __future__ import annotations

from dataclasses import dataclass, field

from swc_shared import orm
from swc_shared.logging import get_logger

from swc_seed import data
from swc_seed.loaders.orm_loader import LoadResult, OrmLoader


@dataclass
class SeedResult:
    """Outcome of one seed run."""

    deleted: list[LoadResult] = field(default_factory=list)
    groups: list[LoadResult] = field(default_factory=list)

    @property
    def counts(self) -> dict[str, int]:
        return {g.table: g.records_loaded for g in self.groups}

    @property
    def records_loaded(self) -> int:
        return sum(g.records_loaded for g in self.groups)


def _ids(rows: list) -> list[str]:
    return [row.id for row in rows]


async def reset(loader: OrmLoader) -> list[LoadResult]:
    """Delete all rows, children before parents."""
    get_logger(__name__, pipeline="seed").info("clearing_existing_data")
    return await loader.delete_all(orm.DELETE_ORDER)


async def run(
    loader: OrmLoader | None = None,
    *,
    reset_first: bool = True,
) -> SeedResult:
    """Insert the sample records; optionally clear every table first."""
    log = get_logger(__name__, pipeline="seed")
    loader = loader or OrmLoader()
    result = SeedResult()
    log.info("seed_start", reset_first=reset_first)

    if reset_first:
        result.deleted = await reset(loader)

    async def group(name: str, table, records) -> list:
        rows, load = await loader.create_many(table, records)
        result.groups.append(load)
        log.info(f"created_{name}", count=load.records_loaded)
        return rows

    techniques = await group("techniques", orm.Technique, data.TECHNIQUES)
    templates = await group("design_templates", orm.DesignTemplate, data.DESIGN_TEMPLATES)
    await group("maintenance_templates", orm.MaintenanceTemplate, data.MAINTENANCE_TEMPLATES)
    materials = await group("materials", orm.Material, data.MATERIALS)
    sites = await group("sites", orm.Site, data.SITES)

    technique_ids = _ids(techniques)
    site_ids = _ids(sites)

    await group(
        "site_techniques", orm.SiteTechnique,
        data.site_techniques(site_ids, technique_ids),
    )
    designs = await group("designs", orm.Design, data.designs(site_ids))
    design_ids = _ids(designs)

    layers = await group(
        "design_layers", orm.DesignLayer,
        data.design_layers(design_ids, _ids(templates), technique_ids),
    )
    boqs = await group("boqs", orm.BOQ, data.boqs(design_ids))
    boq_ids = _ids(boqs)

    await group(
        "boq_items", orm.BOQItem,
        data.boq_items(boq_ids, _ids(layers), _ids(materials), technique_ids),
    )
    await group("metrics", orm.Metric, data.metrics(site_ids))
    await group("cost_records", orm.CostRecord, data.cost_records(boq_ids))

    log.info("seed_complete", records_loaded=result.records_loaded)
    return result
