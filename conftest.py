from typing import Type

import pytest

from StructuredNames.Structures.Name import Name
from StructuredNames.Structures.NameConstruction import name_classes

@pytest.fixture(params=name_classes, ids=lambda name_class: name_class.__name__)
def name_class(request : pytest.FixtureRequest) -> Type[Name]:
    return request.param
