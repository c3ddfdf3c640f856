import pytest

from mixi_recipes.app.core.config import get_settings


@pytest.fixture(autouse=True)
def reset_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def two_recipe_json():
    return """{
      "recipes": [
        {
          "name": "Old Fashioned",
          "description": "A classic bourbon cocktail",
          "ingredients": [
            {"quantity": "2", "unit": "oz", "item": "Bourbon whiskey", "notes": ""},
            {"quantity": "0.5", "unit": "oz", "item": "Simple syrup", "notes": ""},
            {"quantity": "2", "unit": "dash", "item": "Angostura bitters", "notes": ""}
          ],
          "instructions": [
            "Combine all ingredients in an old-fashioned glass",
            "Add ice and stir until well chilled"
          ],
          "glassware": "Old-fashioned glass",
          "garnish": "Orange twist",
          "tags": ["classic", "bourbon"]
        },
        {
          "name": "Margarita",
          "description": "A refreshing tequila cocktail",
          "ingredients": [
            {"quantity": "2", "unit": "oz", "item": "Tequila"},
            {"quantity": "1", "unit": "oz", "item": "Cointreau"},
            {"quantity": "0.75", "unit": "oz", "item": "Lime juice", "notes": "fresh"}
          ],
          "instructions": ["Shake with ice", "Strain into glass"],
          "glassware": "Margarita glass",
          "tags": ["tequila", "citrus"]
        }
      ]
    }"""


@pytest.fixture
def markdown_response():
    return """Here are two cocktails you can make tonight:

### Negroni
_Bitter, bold and stirred._

**Ingredients**
- 1 oz gin
- 1 oz Campari
- 1 oz sweet vermouth

**Instructions**
1) Stir with ice.
2) Strain over a large cube.

**Glassware**: Rocks glass
**Garnish**: Orange peel
**Tags**: classic, bitter

---

### Daiquiri
_Rum, lime and sugar._

**Ingredients**
- 2 oz white rum
- 0.75 oz lime juice (fresh)
- 0.75 oz simple syrup

**Instructions**
1) Shake hard with ice.
2) Double strain into a chilled coupe.

**Glassware**: Coupe
**Tags**: sour, rum
"""
