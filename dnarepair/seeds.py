from dnarepair.classes.protein import Interaction, Protein
from dnarepair.common import logger
from dnarepair.services import positions

HR_PROTEINS = (
    {
        "name": "BRCA1",
        "uniprotId": "P38398",
        "description": "Breast cancer type 1 susceptibility protein",
        "function": "DNA repair and transcription regulation",
        "interactions": ["BRCA2", "RAD51", "BARD1", "PALB2"],
        "position": (200, 100),
    },
    {
        "name": "BRCA2",
        "uniprotId": "P51587",
        "description": "Breast cancer type 2 susceptibility protein",
        "function": "DNA repair and homologous recombination",
        "interactions": ["BRCA1", "RAD51", "PALB2"],
        "position": (300, 150),
    },
    {
        "name": "RAD51",
        "uniprotId": "Q06609",
        "description": "DNA repair protein RAD51 homolog 1",
        "function": "Homologous recombination and DNA repair",
        "interactions": ["BRCA1", "BRCA2", "RAD51B", "RAD51C", "RAD51D"],
        "position": (400, 200),
    },
    {
        "name": "MRE11",
        "uniprotId": "P49959",
        "description": "Double-strand break repair protein MRE11",
        "function": "DNA double-strand break repair",
        "interactions": ["RAD50", "NBS1"],
        "position": (100, 50),
    },
    {
        "name": "RAD50",
        "uniprotId": "Q92878",
        "description": "DNA repair protein RAD50",
        "function": "DNA double-strand break repair",
        "interactions": ["MRE11", "NBS1"],
        "position": (150, 75),
    },
    {
        "name": "NBS1",
        "uniprotId": "O60934",
        "description": "Nibrin",
        "function": "DNA double-strand break repair",
        "interactions": ["MRE11", "RAD50"],
        "position": (200, 50),
    },
    {
        "name": "ATM",
        "uniprotId": "Q13315",
        "description": "Serine-protein kinase ATM",
        "function": "DNA damage response and cell cycle checkpoint",
        "interactions": ["BRCA1", "NBS1", "MRE11"],
        "position": (250, 75),
    },
    {
        "name": "PALB2",
        "uniprotId": "Q86YC2",
        "description": "Partner and localizer of BRCA2",
        "function": "DNA repair and homologous recombination",
        "interactions": ["BRCA1", "BRCA2", "RAD51"],
        "position": (350, 125),
    },
)


class HRSeeder:
    def __init__(self, proteins=HR_PROTEINS):
        self.proteins = proteins

    def seed_proteins(self):
        logger.info("Seeding homologous recombination proteins")
        existing = {p.uniprotId for p in Protein.objects()}
        created = []

        for entry in self.proteins:
            # Proteins already in the database are left as they are.
            if entry["uniprotId"] in existing:
                continue
            protein = Protein(
                name=entry["name"],
                uniprotId=entry["uniprotId"],
                pathway="HR",
                description=entry["description"],
                function=entry["function"],
            )
            protein.save()
            existing.add(entry["uniprotId"])
            created.append((protein, entry["interactions"]))

        # Interactions can only be linked once every partner has an id.
        ids_by_name = {p.name: p.id for p in Protein.objects()}
        for protein, partners in created:
            for partner in partners:
                if partner not in ids_by_name:
                    logger.warning(f"{partner} not in dataset, ignoring interaction with {protein.name}")
                    continue
                protein.interactions.append(Interaction(targetId=ids_by_name[partner]))
            protein.save()

        logger.info(f"Finished seeding HR proteins - total of {len(created):,} proteins added")
        return len(created)

    def seed_positions(self):
        logger.info("Seeding default HR layout")
        ids_by_name = {p.name: str(p.id) for p in Protein.objects()}
        layout = {}
        for entry in self.proteins:
            if entry["name"] not in ids_by_name:
                logger.warning(f"{entry['name']} has not been seeded, skipping its position")
                continue
            x, y = entry["position"]
            layout[ids_by_name[entry["name"]]] = {"x": x, "y": y}
        return positions.save_positions("HR", layout)
