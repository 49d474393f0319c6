#!/usr/bin/env python

import os

import click

from app.config import get_settings
from dnarepair.classes.protein_position import PATHWAYS
from dnarepair.common import connect, logger
from dnarepair.errors import DNARepairError
from dnarepair.seeds import HRSeeder
from dnarepair.services import admins, positions


@click.group()
def cli():
    settings = get_settings()
    connect(host=settings.mongodb_url, db=settings.mongodb_db)


@click.group(help="Populate the knowledge base with reference data")
def seed():
    pass


@click.group(name="positions", help="Operations on saved pathway layouts")
def positions_group():
    pass


@cli.command(
    name="setup-admin",
    help="Creates the initial super_admin from ADMIN_USERNAME, ADMIN_PASSWORD and ADMIN_EMAIL",
)
def setup_admin():
    existing = admins.count_admins()
    if existing:
        logger.info(f"{existing} admin(s) already exist, nothing to do")
        return

    password = os.getenv("ADMIN_PASSWORD")
    if not password:
        raise click.ClickException("ADMIN_PASSWORD environment variable is required")

    try:
        admin = admins.setup_first_admin(
            os.getenv("ADMIN_USERNAME", "admin"),
            password,
            email=os.getenv("ADMIN_EMAIL"),
            rounds=get_settings().bcrypt_rounds,
        )
    except DNARepairError as e:
        raise click.ClickException(e.message)

    logger.info(f"Admin {admin.username!r} created - change the password after first login")


@seed.command(name="proteins", help="Adds the homologous recombination reference proteins")
def seed_proteins():
    HRSeeder().seed_proteins()


@seed.command(name="positions", help="Writes the default HR pathway layout for seeded proteins")
def seed_positions():
    count = HRSeeder().seed_positions()
    logger.info(f"Wrote {count} HR positions")


@positions_group.command(help="Removes every saved position of PATHWAY")
@click.argument("pathway", type=click.Choice(PATHWAYS))
@click.confirmation_option(prompt="This deletes the saved layout. Continue?")
def reset(pathway):
    deleted = positions.reset_positions(pathway)
    logger.info(f"Removed {deleted} positions from {pathway}")


cli.add_command(seed)
cli.add_command(positions_group)


if __name__ == "__main__":
    cli()
