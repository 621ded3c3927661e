import pytest

from infrastructure.classification.static import StaticDomainClassifier

INSTITUTIONS = {
    "stanford.edu": ["Stanford University"],
    "mit.edu": ["Massachusetts Institute of Technology"],
    "ox.ac.uk": ["University of Oxford"],
}


@pytest.fixture
def classifier():
    return StaticDomainClassifier(INSTITUTIONS)
