from dnarepair.classes.protein import Protein
from dnarepair.seeds import HR_PROTEINS, HRSeeder
from dnarepair.services import positions


def test_seed_proteins_links_interactions_by_name():
    added = HRSeeder().seed_proteins()

    assert added == len(HR_PROTEINS)
    brca1 = Protein.objects.get(name="BRCA1")
    partners = {Protein.objects.get(id=i.targetId).name for i in brca1.interactions}
    # BARD1 is not part of the seed set.
    assert partners == {"BRCA2", "RAD51", "PALB2"}
    assert {p.pathway for p in Protein.objects()} == {"HR"}


def test_seed_proteins_skips_existing_accessions():
    HRSeeder().seed_proteins()

    assert HRSeeder().seed_proteins() == 0
    assert Protein.objects.count() == len(HR_PROTEINS)


def test_seed_positions_keys_layout_by_protein_id():
    seeder = HRSeeder()
    seeder.seed_proteins()

    written = seeder.seed_positions()

    layout = positions.get_position_map("HR")
    brca1 = Protein.objects.get(name="BRCA1")
    assert written == len(HR_PROTEINS)
    assert layout[str(brca1.id)] == {"x": 200, "y": 100}


def test_seed_positions_without_proteins_writes_nothing():
    assert HRSeeder().seed_positions() == 0
    assert positions.get_position_map("HR") == {}
