"""Static vocabularies shared by the AI recipe parsing stages."""

FRACTION_MAP = {
    "¼": "1/4",
    "½": "1/2",
    "¾": "3/4",
    "⅐": "1/7",
    "⅑": "1/9",
    "⅒": "1/10",
    "⅓": "1/3",
    "⅔": "2/3",
    "⅕": "1/5",
    "⅖": "2/5",
    "⅗": "3/5",
    "⅘": "4/5",
    "⅙": "1/6",
    "⅚": "5/6",
    "⅛": "1/8",
    "⅜": "3/8",
    "⅝": "5/8",
    "⅞": "7/8",
}

FRACTION_CHARS = "".join(FRACTION_MAP.keys())

# Decimal strings LLMs emit for bar measures, in lookup order
DECIMAL_TO_FRACTION = {
    "0.125": "1/8",
    "0.25": "1/4",
    "0.33": "1/3",
    "0.333": "1/3",
    "0.375": "3/8",
    "0.5": "1/2",
    "0.625": "5/8",
    "0.66": "2/3",
    "0.67": "2/3",
    "0.667": "2/3",
    "0.75": "3/4",
    "0.875": "7/8",
    "1.25": "1 1/4",
    "1.33": "1 1/3",
    "1.5": "1 1/2",
    "1.67": "1 2/3",
    "1.75": "1 3/4",
    "2.25": "2 1/4",
    "2.5": "2 1/2",
    "2.75": "2 3/4",
    "3.5": "3 1/2",
    "4.5": "4 1/2",
}

# Fractional remainders tried after splitting off the whole part
REMAINDER_FRACTIONS = (
    ((0.25,), "1/4"),
    ((0.5,), "1/2"),
    ((0.75,), "3/4"),
    ((0.33, 0.333), "1/3"),
    ((0.67, 0.667), "2/3"),
)

FRACTION_TOLERANCE = 0.01

UNIT_STANDARDIZATION = {
    "ounce": "oz",
    "ounces": "oz",
    "fl oz": "oz",
    "milliliter": "ml",
    "milliliters": "ml",
    "millilitre": "ml",
    "millilitres": "ml",
    "centiliter": "cl",
    "centiliters": "cl",
    "teaspoon": "tsp",
    "teaspoons": "tsp",
    "tablespoon": "tbsp",
    "tablespoons": "tbsp",
    "bar spoon": "barspoon",
    "bar spoons": "barspoons",
}

# Discrete units whose name changes with the count
PLURAL_UNITS = {
    "dash": "dashes",
    "drop": "drops",
    "slice": "slices",
    "wedge": "wedges",
}

COMMON_UNITS = {
    "oz",
    "ounce",
    "ml",
    "milliliter",
    "millilitre",
    "cl",
    "centiliter",
    "l",
    "liter",
    "litre",
    "tsp",
    "teaspoon",
    "tbsp",
    "tablespoon",
    "cup",
    "pint",
    "dash",
    "drop",
    "barspoon",
    "part",
    "splash",
    "pinch",
    "shot",
    "jigger",
    "slice",
    "wedge",
    "wheel",
    "twist",
    "sprig",
    "leaf",
    "leaves",
    "cube",
    "piece",
    "peel",
    "can",
    "bottle",
    "g",
    "gram",
}

# Canonical key -> the cleaned spellings (lowercase, alphanumerics only) that mean it
FIELD_SYNONYMS = {
    "recipes": ("recipes", "recipelist", "cocktails", "drinks"),
    "recipe": ("recipe",),
    "name": ("name", "recipename", "title", "cocktailname", "drinkname", "nombre", "nom"),
    "description": ("description", "desc", "summary", "about", "descripcion"),
    "ingredients": (
        "ingredient",
        "ingredients",
        "ingredientlist",
        "ingredientslist",
        "recipeingredients",
        "ingrdnts",
        "ingrédients",
        "ingrdients",
        "ingrãdients",
        "ingredientes",
        "ingredienti",
        "zutaten",
    ),
    "instructions": (
        "instruction",
        "instructions",
        "instructionlist",
        "recipeinstructions",
        "step",
        "steps",
        "method",
        "directions",
        "direction",
        "preparation",
        "howtomake",
        "instrucciones",
        "zubereitung",
    ),
    "glassware": ("glass", "glassware", "glasstype", "glasses", "servingglass"),
    "garnish": ("garnish", "garnishes", "garnishing", "decoration"),
    "tags": ("tag", "tags", "keywords", "labels", "categories"),
    "quantity": ("quantity", "amount", "qty", "measure"),
    "unit": ("unit", "units", "measurementunit"),
    "item": ("item", "itemname", "ingredientname"),
    "notes": ("notes", "note", "comment", "comments"),
}

KEY_LOOKUP = {
    variant: canonical for canonical, variants in FIELD_SYNONYMS.items() for variant in variants
}

INGREDIENT_MARKER_KEYS = frozenset({"quantity", "item", "ingredient", "ingredients"})

# Containers nested deeper than this are dropped during key normalization
MAX_NESTING_DEPTH = 32
