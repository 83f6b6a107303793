import pytest

from auditlogic import canon

ROW = "2024-01-01,1000,50,5000,400,300,300,150,85,72,45,0,125.50"


@pytest.fixture
def template_header():
    return canon.TEMPLATE_HEADER


@pytest.fixture
def one_row_csv(template_header):
    return f"{template_header}\n{ROW}\n"


@pytest.fixture
def three_row_csv(template_header):
    return "\n".join(
        [
            template_header,
            "2024-01-01,1000,50,5000,400,300,300,150,85,72,45,0,125.50",
            "2024-02-01,800,40,4000,300,200,200,120,80,60,40,10,100.00",
            "2024-03-01,900,45,4500,350,250,250,130,75,65,42,20,110.25",
        ]
    )


@pytest.fixture
def building():
    return {
        "name": "Civic Centre",
        "type": "Office",
        "size": 25000,
        "location": "Springfield",
        "yearBuilt": 1998,
        "numberOfFloors": 4,
        "occupancyPercentage": 85,
    }


@pytest.fixture
def systems():
    return {
        "hvacSystem": {
            "type": "Rooftop unit",
            "age": 12,
            "efficiency": 0.8,
            "refrigerantType": "R-410A",
            "maintenanceSchedule": "Quarterly",
        },
        "lightingSystem": {
            "types": ["LED", "T8"],
            "controlSystems": ["Occupancy sensors"],
            "operatingSchedule": "7am-7pm",
        },
        "buildingEnvelope": {
            "wallConstruction": "Brick",
            "roofType": "Flat membrane",
            "windowTypes": ["Double pane"],
            "insulationRValues": {"walls": 13, "roof": 30, "foundation": 10},
        },
    }


@pytest.fixture
def verification():
    return {
        "verifierName": "J. Doe",
        "verifierCredentials": "CEM",
        "verifierLicenseNumber": "L-123",
        "verificationDate": "2024-05-01",
    }
