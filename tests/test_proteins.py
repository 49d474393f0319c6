from bson import ObjectId

from dnarepair.classes.protein import Protein
from tests.helpers import brca1


def test_create_protein_returns_generated_id(client, admin_headers):
    response = client.post("/api/proteins", json=brca1(), headers=admin_headers)

    assert response.status_code == 201
    body = response.json()
    assert ObjectId.is_valid(body["_id"])
    assert body["name"] == "BRCA1"
    assert body["interactions"] == []
    assert "createdAt" in body and "updatedAt" in body


def test_create_protein_trims_name_and_accession(client, admin_headers):
    response = client.post(
        "/api/proteins", json=brca1(name="  BRCA1 ", uniprotId=" P38398 "), headers=admin_headers
    )

    assert response.status_code == 201
    assert response.json()["name"] == "BRCA1"
    assert response.json()["uniprotId"] == "P38398"


def test_duplicate_uniprot_id_is_rejected(client, admin_headers):
    first = client.post("/api/proteins", json=brca1(), headers=admin_headers)
    second = client.post("/api/proteins", json=brca1(name="Other"), headers=admin_headers)

    assert first.status_code == 201
    assert second.status_code == 400
    assert second.json()["message"] == "Error creating protein"
    assert Protein.objects(uniprotId="P38398").count() == 1


def test_create_protein_validates_pathway_and_required_fields(client, admin_headers):
    bad_pathway = client.post("/api/proteins", json=brca1(pathway="BER"), headers=admin_headers)
    missing = client.post("/api/proteins", json={"name": "ATM"}, headers=admin_headers)

    assert bad_pathway.status_code == 400
    assert missing.status_code == 400
    assert missing.json()["message"] == "Invalid request data"
    assert Protein.objects.count() == 0


def test_blank_required_fields_are_rejected(client, admin_headers):
    blank_name = client.post("/api/proteins", json=brca1(name="   ", description=""), headers=admin_headers)
    blank_accession = client.post("/api/proteins", json=brca1(uniprotId=" "), headers=admin_headers)

    assert blank_name.status_code == 400
    assert blank_name.json()["message"] == "Error creating protein"
    assert blank_accession.status_code == 400
    assert Protein.objects.count() == 0


def test_update_cannot_blank_a_required_field(client, admin_headers):
    protein = client.post("/api/proteins", json=brca1(), headers=admin_headers).json()

    response = client.put(f"/api/proteins/{protein['_id']}", json={"function": "  "}, headers=admin_headers)

    assert response.status_code == 400
    assert Protein.objects.get(id=protein["_id"]).function == brca1()["function"]


def test_create_protein_with_interactions(client, admin_headers):
    target = client.post("/api/proteins", json=brca1(), headers=admin_headers).json()
    response = client.post(
        "/api/proteins",
        json=brca1(
            name="BARD1",
            uniprotId="Q99728",
            interactions=[
                {
                    "targetId": target["_id"],
                    "type": "binding",
                    "targetModification": {"position": "S988", "type": "phosphorylation"},
                }
            ],
        ),
        headers=admin_headers,
    )

    assert response.status_code == 201
    interaction = response.json()["interactions"][0]
    assert interaction["targetId"] == target["_id"]
    assert interaction["targetModification"] == {"position": "S988", "type": "phosphorylation"}


def test_interaction_with_malformed_target_is_rejected(client, admin_headers):
    response = client.post(
        "/api/proteins",
        json=brca1(interactions=[{"targetId": "not-an-id"}]),
        headers=admin_headers,
    )

    assert response.status_code == 400


def test_get_protein_by_id(client, admin_headers):
    created = client.post("/api/proteins", json=brca1(), headers=admin_headers).json()

    response = client.get(f"/api/proteins/{created['_id']}")

    assert response.status_code == 200
    assert response.json()["uniprotId"] == "P38398"


def test_get_protein_with_malformed_or_unknown_id(client, admin_headers):
    client.post("/api/proteins", json=brca1(), headers=admin_headers)

    malformed = client.get("/api/proteins/not-an-object-id")
    unknown = client.get(f"/api/proteins/{ObjectId()}")

    assert malformed.status_code == 404
    assert malformed.json() == {"message": "Protein not found"}
    assert unknown.status_code == 404


def test_list_and_filter_by_pathway(client, admin_headers):
    client.post("/api/proteins", json=brca1(), headers=admin_headers)
    client.post(
        "/api/proteins", json=brca1(name="Ku70", uniprotId="P12956", pathway="NHEJ"), headers=admin_headers
    )
    client.post(
        "/api/proteins", json=brca1(name="MRE11", uniprotId="P49959", pathway="Both"), headers=admin_headers
    )

    everything = client.get("/api/proteins").json()
    nhej = client.get("/api/proteins/pathway/NHEJ").json()

    assert len(everything) == 3
    assert [p["name"] for p in nhej] == ["Ku70"]
    assert client.get("/api/proteins/pathway/BER").status_code == 400


def test_update_merges_fields(client, admin_headers):
    created = client.post("/api/proteins", json=brca1(), headers=admin_headers).json()

    response = client.put(
        f"/api/proteins/{created['_id']}", json={"pathway": "Both"}, headers=admin_headers
    )

    assert response.status_code == 200
    body = response.json()
    assert body["pathway"] == "Both"
    assert body["name"] == "BRCA1"
    assert body["description"] == created["description"]


def test_update_unknown_protein(client, admin_headers):
    response = client.put(f"/api/proteins/{ObjectId()}", json={"name": "X"}, headers=admin_headers)

    assert response.status_code == 404


def test_update_to_taken_uniprot_id_is_rejected(client, admin_headers):
    client.post("/api/proteins", json=brca1(), headers=admin_headers)
    other = client.post(
        "/api/proteins", json=brca1(name="BRCA2", uniprotId="P51587"), headers=admin_headers
    ).json()

    response = client.put(
        f"/api/proteins/{other['_id']}", json={"uniprotId": "P38398"}, headers=admin_headers
    )

    assert response.status_code == 400
    assert Protein.objects(uniprotId="P38398").count() == 1


def test_delete_protein(client, admin_headers):
    created = client.post("/api/proteins", json=brca1(), headers=admin_headers).json()

    response = client.delete(f"/api/proteins/{created['_id']}", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {"message": "Protein deleted successfully"}
    assert client.get(f"/api/proteins/{created['_id']}").status_code == 404
    assert client.delete(f"/api/proteins/{created['_id']}", headers=admin_headers).status_code == 404


def test_delete_does_not_cascade_to_positions(client, admin_headers):
    created = client.post("/api/proteins", json=brca1(), headers=admin_headers).json()
    client.put(f"/api/protein-positions/HR/{created['_id']}", json={"x": 1, "y": 2}, headers=admin_headers)

    client.delete(f"/api/proteins/{created['_id']}", headers=admin_headers)

    assert created["_id"] in client.get("/api/protein-positions/HR").json()


def test_mutations_require_a_token(client):
    response = client.post("/api/proteins", json=brca1())

    assert response.status_code == 401
    assert response.json() == {"message": "No token, authorization denied"}
    assert Protein.objects.count() == 0
