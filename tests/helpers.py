ADMIN_PASSWORD = "s3cret-pass"


def brca1(**overrides):
    protein = {
        "name": "BRCA1",
        "uniprotId": "P38398",
        "pathway": "HR",
        "description": "Breast cancer type 1 susceptibility protein",
        "function": "DNA repair and transcription regulation",
    }
    protein.update(overrides)
    return protein
