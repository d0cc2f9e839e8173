"""Bundled food catalog records (nutrition per 100g)."""

CATALOG_VERSION = "2025.01.22"

_UPDATED = "2025-01-22"

FOOD_RECORDS: list[dict[str, object]] = [
    # Proteins
    {
        "id": "chicken-breast-skinless",
        "name": "Chicken Breast, Skinless",
        "category": "proteins",
        "subcategory": "Poultry",
        "nutrition": {
            "calories": 165,
            "protein": 31.0,
            "carbs": 0,
            "fat": 3.6,
            "fiber": 0,
            "sodium": 74,
        },
        "portions": [
            {"id": "portion-1", "name": "100g", "grams": 100, "is_default": True, "is_metric": True},
            {"id": "portion-2", "name": "1 breast (medium)", "grams": 174, "description": "About palm-sized"},
            {"id": "portion-3", "name": "1 oz", "grams": 28.35, "is_metric": False},
            {"id": "portion-4", "name": "3 oz serving", "grams": 85, "description": "Standard serving size"},
        ],
        "dietary_info": {
            "vegetarian": False,
            "vegan": False,
            "gluten_free": True,
            "dairy_free": True,
            "nut_free": True,
            "allergens": [],
            "tags": ["high_protein", "lean"],
        },
        "search_terms": ["chicken", "breast", "poultry", "white meat"],
        "verified": True,
        "last_updated": _UPDATED,
    },
    {
        "id": "salmon-atlantic-wild",
        "name": "Atlantic Salmon, Wild",
        "category": "proteins",
        "subcategory": "Fish",
        "nutrition": {
            "calories": 208,
            "protein": 25.4,
            "carbs": 0,
            "fat": 12.4,
            "fiber": 0,
            "sodium": 59,
            "vitamin_d": 526,
        },
        "portions": [
            {"id": "portion-1", "name": "100g", "grams": 100, "is_default": True, "is_metric": True},
            {"id": "portion-2", "name": "1 fillet (medium)", "grams": 154, "description": "Standard fillet"},
            {"id": "portion-3", "name": "3.5 oz", "grams": 99, "is_metric": False},
        ],
        "dietary_info": {
            "vegetarian": False,
            "vegan": False,
            "gluten_free": True,
            "dairy_free": True,
            "nut_free": True,
            "allergens": ["fish"],
            "tags": ["high_protein", "heart_healthy"],
        },
        "search_terms": ["salmon", "fish", "omega-3"],
        "verified": True,
        "last_updated": _UPDATED,
    },
    {
        "id": "egg-whole-large",
        "name": "Egg, Whole, Large",
        "category": "proteins",
        "subcategory": "Eggs",
        "nutrition": {
            "calories": 143,
            "protein": 12.6,
            "carbs": 0.7,
            "fat": 9.5,
            "sodium": 142,
            "iron": 1.8,
            "calcium": 56,
            "vitamin_d": 82,
        },
        "portions": [
            {"id": "portion-1", "name": "100g", "grams": 100, "is_default": True, "is_metric": True},
            {"id": "portion-2", "name": "1 large egg", "grams": 50, "description": "Without shell"},
            {"id": "portion-3", "name": "2 large eggs", "grams": 100},
        ],
        "dietary_info": {
            "vegetarian": True,
            "vegan": False,
            "gluten_free": True,
            "dairy_free": True,
            "nut_free": True,
            "allergens": ["eggs"],
            "tags": ["high_protein"],
        },
        "search_terms": ["egg", "eggs", "breakfast", "omelette"],
        "verified": True,
        "last_updated": _UPDATED,
    },
    {
        "id": "almonds-raw",
        "name": "Almonds, Raw",
        "category": "proteins",
        "subcategory": "Nuts & Seeds",
        "nutrition": {
            "calories": 579,
            "protein": 21.2,
            "carbs": 21.6,
            "fat": 49.9,
            "fiber": 12.5,
            "calcium": 269,
            "sodium": 1,
        },
        "portions": [
            {"id": "portion-1", "name": "100g", "grams": 100, "is_default": True, "is_metric": True},
            {"id": "portion-2", "name": "1 oz (23 almonds)", "grams": 28, "description": "Standard serving"},
            {"id": "portion-3", "name": "1 handful", "grams": 30, "description": "Small handful"},
            {"id": "portion-4", "name": "1 cup whole", "grams": 143, "description": "Large serving"},
        ],
        "dietary_info": {
            "vegetarian": True,
            "vegan": True,
            "gluten_free": True,
            "dairy_free": True,
            "nut_free": False,
            "allergens": ["tree_nuts"],
            "tags": ["high_protein", "high_fiber", "heart_healthy"],
        },
        "search_terms": ["almonds", "nuts", "tree nuts", "protein"],
        "verified": True,
        "last_updated": _UPDATED,
    },
    # Dairy
    {
        "id": "greek-yogurt-plain-nonfat",
        "name": "Greek Yogurt, Plain, Non-Fat",
        "category": "dairy",
        "nutrition": {
            "calories": 59,
            "protein": 10.3,
            "carbs": 3.6,
            "fat": 0.4,
            "sugar": 4.0,
            "calcium": 110,
            "sodium": 36,
        },
        "portions": [
            {"id": "portion-1", "name": "100g", "grams": 100, "is_default": True, "is_metric": True},
            {"id": "portion-2", "name": "1 cup (8 oz)", "grams": 227, "description": "Standard container"},
            {"id": "portion-3", "name": "1/2 cup", "grams": 113.5, "description": "Small serving"},
            {"id": "portion-4", "name": "1 tbsp", "grams": 15, "description": "Small dollop"},
        ],
        "dietary_info": {
            "vegetarian": True,
            "vegan": False,
            "gluten_free": True,
            "dairy_free": False,
            "nut_free": True,
            "allergens": ["milk"],
            "tags": ["high_protein"],
        },
        "search_terms": ["yogurt", "yoghurt", "greek", "dairy", "protein"],
        "verified": True,
        "last_updated": _UPDATED,
    },
    {
        "id": "milk-whole",
        "name": "Milk, Whole",
        "category": "dairy",
        "nutrition": {
            "calories": 61,
            "protein": 3.2,
            "carbs": 4.8,
            "fat": 3.3,
            "sugar": 5.1,
            "calcium": 113,
            "sodium": 43,
            "vitamin_d": 51,
        },
        "portions": [
            {"id": "portion-1", "name": "100g", "grams": 100, "is_default": True, "is_metric": True},
            {"id": "portion-2", "name": "1 cup", "grams": 244, "description": "Standard glass"},
            {"id": "portion-3", "name": "1/2 cup", "grams": 122},
        ],
        "dietary_info": {
            "vegetarian": True,
            "vegan": False,
            "gluten_free": True,
            "dairy_free": False,
            "nut_free": True,
            "allergens": ["milk"],
            "tags": [],
        },
        "search_terms": ["milk", "dairy", "whole milk"],
        "verified": True,
        "last_updated": _UPDATED,
    },
    # Grains
    {
        "id": "quinoa-cooked",
        "name": "Quinoa, Cooked",
        "category": "grains",
        "nutrition": {
            "calories": 120,
            "protein": 4.4,
            "carbs": 22.0,
            "fat": 1.9,
            "fiber": 2.8,
            "iron": 1.5,
            "sodium": 7,
        },
        "portions": [
            {"id": "portion-1", "name": "100g", "grams": 100, "is_default": True, "is_metric": True},
            {"id": "portion-2", "name": "1 cup cooked", "grams": 185, "description": "Standard serving"},
            {"id": "portion-3", "name": "1/2 cup cooked", "grams": 92.5, "description": "Side portion"},
            {"id": "portion-4", "name": "1/4 cup dry", "grams": 43, "description": "Before cooking"},
        ],
        "dietary_info": {
            "vegetarian": True,
            "vegan": True,
            "gluten_free": True,
            "dairy_free": True,
            "nut_free": True,
            "allergens": [],
            "tags": ["high_protein", "high_fiber", "whole_grain"],
        },
        "search_terms": ["quinoa", "grain", "superfood", "complete protein"],
        "verified": True,
        "last_updated": _UPDATED,
    },
    {
        "id": "brown-rice-cooked",
        "name": "Brown Rice, Long Grain, Cooked",
        "category": "grains",
        "nutrition": {
            "calories": 112,
            "protein": 2.6,
            "carbs": 22.0,
            "fat": 0.9,
            "fiber": 1.8,
            "sodium": 5,
        },
        "portions": [
            {"id": "portion-1", "name": "100g", "grams": 100, "is_default": True, "is_metric": True},
            {"id": "portion-2", "name": "1 cup cooked", "grams": 195, "description": "Standard serving"},
            {"id": "portion-3", "name": "1/2 cup cooked", "grams": 97.5, "description": "Side portion"},
            {"id": "portion-4", "name": "1/3 cup dry", "grams": 67, "description": "Before cooking"},
        ],
        "dietary_info": {
            "vegetarian": True,
            "vegan": True,
            "gluten_free": True,
            "dairy_free": True,
            "nut_free": True,
            "allergens": [],
            "tags": ["whole_grain", "high_fiber"],
        },
        "search_terms": ["brown rice", "rice", "grain", "whole grain"],
        "verified": True,
        "last_updated": _UPDATED,
    },
    {
        "id": "oats-rolled-dry",
        "name": "Oats, Rolled, Dry",
        "category": "grains",
        "nutrition": {
            "calories": 379,
            "protein": 13.2,
            "carbs": 67.7,
            "fat": 6.5,
            "fiber": 10.1,
            "iron": 4.3,
            "sodium": 6,
        },
        "portions": [
            {"id": "portion-1", "name": "100g", "grams": 100, "is_default": True, "is_metric": True},
            {"id": "portion-2", "name": "1/2 cup dry", "grams": 40, "description": "One bowl of oatmeal"},
            {"id": "portion-3", "name": "1 cup dry", "grams": 80},
        ],
        "dietary_info": {
            "vegetarian": True,
            "vegan": True,
            "gluten_free": False,
            "dairy_free": True,
            "nut_free": True,
            "allergens": [],
            "tags": ["whole_grain", "high_fiber"],
        },
        "search_terms": ["oats", "oatmeal", "porridge", "breakfast", "cereal"],
        "verified": True,
        "last_updated": _UPDATED,
    },
    {
        "id": "bread-whole-wheat",
        "name": "Bread, Whole Wheat",
        "category": "grains",
        "subcategory": "Bread",
        "nutrition": {
            "calories": 252,
            "protein": 12.4,
            "carbs": 42.7,
            "fat": 3.5,
            "fiber": 6.0,
            "iron": 2.5,
            "sodium": 450,
        },
        "portions": [
            {"id": "portion-1", "name": "100g", "grams": 100, "is_default": True, "is_metric": True},
            {"id": "portion-2", "name": "1 slice", "grams": 32, "description": "Sandwich slice"},
            {"id": "portion-3", "name": "2 slices", "grams": 64},
        ],
        "dietary_info": {
            "vegetarian": True,
            "vegan": True,
            "gluten_free": False,
            "dairy_free": True,
            "nut_free": True,
            "allergens": ["wheat"],
            "tags": ["whole_grain", "high_fiber"],
        },
        "search_terms": ["bread", "whole wheat", "toast", "sandwich"],
        "verified": True,
        "last_updated": _UPDATED,
    },
    # Vegetables
    {
        "id": "broccoli-raw",
        "name": "Broccoli, Raw",
        "category": "vegetables",
        "subcategory": "Cruciferous",
        "nutrition": {
            "calories": 34,
            "protein": 2.8,
            "carbs": 7.0,
            "fat": 0.4,
            "fiber": 2.6,
            "vitamin_c": 89.2,
            "calcium": 47,
            "sodium": 33,
        },
        "portions": [
            {"id": "portion-1", "name": "100g", "grams": 100, "is_default": True, "is_metric": True},
            {"id": "portion-2", "name": "1 cup chopped", "grams": 91, "description": "About 1 cup"},
            {"id": "portion-3", "name": "1 medium stalk", "grams": 148, "description": "One stalk with florets"},
            {"id": "portion-4", "name": "1 floret", "grams": 11, "description": "Single piece"},
        ],
        "dietary_info": {
            "vegetarian": True,
            "vegan": True,
            "gluten_free": True,
            "dairy_free": True,
            "nut_free": True,
            "allergens": [],
            "tags": ["high_fiber", "low_sodium"],
        },
        "search_terms": ["broccoli", "vegetable", "green", "cruciferous"],
        "verified": True,
        "last_updated": _UPDATED,
    },
    {
        "id": "spinach-raw",
        "name": "Spinach, Raw",
        "category": "vegetables",
        "subcategory": "Leafy Greens",
        "nutrition": {
            "calories": 23,
            "protein": 2.9,
            "carbs": 3.6,
            "fat": 0.4,
            "fiber": 2.2,
            "iron": 2.7,
            "vitamin_c": 28.1,
            "calcium": 99,
            "sodium": 79,
        },
        "portions": [
            {"id": "portion-1", "name": "100g", "grams": 100, "is_default": True, "is_metric": True},
            {"id": "portion-2", "name": "1 cup", "grams": 30, "description": "Fresh leaves"},
            {"id": "portion-3", "name": "1 bunch", "grams": 340, "description": "Whole bunch"},
            {"id": "portion-4", "name": "1 handful", "grams": 85, "description": "Generous handful"},
        ],
        "dietary_info": {
            "vegetarian": True,
            "vegan": True,
            "gluten_free": True,
            "dairy_free": True,
            "nut_free": True,
            "allergens": [],
            "tags": ["high_fiber", "low_sodium"],
        },
        "search_terms": ["spinach", "leafy green", "iron", "vegetable"],
        "verified": True,
        "last_updated": _UPDATED,
    },
    # Fruits
    {
        "id": "banana-medium",
        "name": "Banana, Medium",
        "category": "fruits",
        "nutrition": {
            "calories": 89,
            "protein": 1.1,
            "carbs": 22.8,
            "fat": 0.3,
            "fiber": 2.6,
            "sugar": 12.2,
            "sodium": 1,
        },
        "portions": [
            {"id": "portion-1", "name": "100g", "grams": 100, "is_default": True, "is_metric": True},
            {"id": "portion-2", "name": "1 medium", "grams": 118, "description": "Standard banana"},
            {"id": "portion-3", "name": "1 large", "grams": 136, "description": "Large banana"},
            {"id": "portion-4", "name": "1/2 medium", "grams": 59, "description": "Half banana"},
        ],
        "dietary_info": {
            "vegetarian": True,
            "vegan": True,
            "gluten_free": True,
            "dairy_free": True,
            "nut_free": True,
            "allergens": [],
            "tags": ["high_fiber"],
        },
        "search_terms": ["banana", "fruit", "potassium"],
        "verified": True,
        "last_updated": _UPDATED,
    },
    {
        "id": "blueberries-fresh",
        "name": "Blueberries, Fresh",
        "category": "fruits",
        "subcategory": "Berries",
        "nutrition": {
            "calories": 57,
            "protein": 0.7,
            "carbs": 14.5,
            "fat": 0.3,
            "fiber": 2.4,
            "sugar": 10.0,
            "vitamin_c": 9.7,
            "sodium": 1,
        },
        "portions": [
            {"id": "portion-1", "name": "100g", "grams": 100, "is_default": True, "is_metric": True},
            {"id": "portion-2", "name": "1 cup", "grams": 148, "description": "About 148 berries"},
            {"id": "portion-3", "name": "1/2 cup", "grams": 74, "description": "Small serving"},
            {"id": "portion-4", "name": "1 pint", "grams": 312, "description": "Container size"},
        ],
        "dietary_info": {
            "vegetarian": True,
            "vegan": True,
            "gluten_free": True,
            "dairy_free": True,
            "nut_free": True,
            "allergens": [],
            "tags": ["high_fiber", "low_sodium"],
        },
        "search_terms": ["blueberry", "blueberries", "berry", "antioxidant"],
        "verified": True,
        "last_updated": _UPDATED,
    },
    # Fats & oils
    {
        "id": "avocado-medium",
        "name": "Avocado, Medium",
        "category": "fats",
        "nutrition": {
            "calories": 160,
            "protein": 2.0,
            "carbs": 8.5,
            "fat": 14.7,
            "fiber": 6.7,
            "sodium": 7,
        },
        "portions": [
            {"id": "portion-1", "name": "100g", "grams": 100, "is_default": True, "is_metric": True},
            {"id": "portion-2", "name": "1 medium", "grams": 150, "description": "Whole avocado"},
            {"id": "portion-3", "name": "1/2 medium", "grams": 75, "description": "Half avocado"},
            {"id": "portion-4", "name": "1/4 medium", "grams": 37.5, "description": "Quarter slice"},
        ],
        "dietary_info": {
            "vegetarian": True,
            "vegan": True,
            "gluten_free": True,
            "dairy_free": True,
            "nut_free": True,
            "allergens": [],
            "tags": ["high_fiber", "heart_healthy"],
        },
        "search_terms": ["avocado", "healthy fat", "guacamole"],
        "verified": True,
        "last_updated": _UPDATED,
    },
    {
        "id": "olive-oil-extra-virgin",
        "name": "Olive Oil, Extra Virgin",
        "category": "fats",
        "nutrition": {
            "calories": 884,
            "protein": 0,
            "carbs": 0,
            "fat": 100,
            "sodium": 2,
        },
        "portions": [
            {"id": "portion-1", "name": "100g", "grams": 100, "is_default": True, "is_metric": True},
            {"id": "portion-2", "name": "1 tbsp", "grams": 13.5, "description": "Standard serving"},
            {"id": "portion-3", "name": "1 tsp", "grams": 4.5, "description": "Small amount"},
            {"id": "portion-4", "name": "1/4 cup", "grams": 54, "description": "Cooking amount"},
        ],
        "dietary_info": {
            "vegetarian": True,
            "vegan": True,
            "gluten_free": True,
            "dairy_free": True,
            "nut_free": True,
            "allergens": [],
            "tags": ["heart_healthy"],
        },
        "search_terms": ["olive oil", "oil", "healthy fat", "mediterranean"],
        "verified": True,
        "last_updated": _UPDATED,
    },
    # Beverages
    {
        "id": "water-still",
        "name": "Water, Still",
        "category": "beverages",
        "nutrition": {
            "calories": 0,
            "protein": 0,
            "carbs": 0,
            "fat": 0,
            "sodium": 4,
        },
        "portions": [
            {"id": "portion-1", "name": "100ml", "grams": 100, "is_default": True, "is_metric": True},
            {"id": "portion-2", "name": "1 glass", "grams": 250},
            {"id": "portion-3", "name": "1 bottle (500ml)", "grams": 500},
        ],
        "dietary_info": {
            "vegetarian": True,
            "vegan": True,
            "gluten_free": True,
            "dairy_free": True,
            "nut_free": True,
            "allergens": [],
            "tags": ["low_sodium"],
        },
        "search_terms": ["water", "hydration", "drink"],
        "verified": True,
        "last_updated": _UPDATED,
    },
    {
        "id": "sports-drink",
        "name": "Sports Drink, Electrolyte",
        "category": "beverages",
        "nutrition": {
            "calories": 26,
            "protein": 0,
            "carbs": 6.4,
            "fat": 0,
            "sugar": 5.8,
            "sodium": 41,
        },
        "portions": [
            {"id": "portion-1", "name": "100ml", "grams": 100, "is_default": True, "is_metric": True},
            {"id": "portion-2", "name": "1 bottle (20 fl oz)", "grams": 591},
        ],
        "dietary_info": {
            "vegetarian": True,
            "vegan": True,
            "gluten_free": True,
            "dairy_free": True,
            "nut_free": True,
            "allergens": [],
            "tags": [],
        },
        "search_terms": ["sports drink", "electrolyte", "hydration", "drink"],
        "verified": True,
        "last_updated": _UPDATED,
    },
    # Snacks & condiments
    {
        "id": "pretzels-salted",
        "name": "Pretzels, Hard, Salted",
        "category": "snacks",
        "nutrition": {
            "calories": 380,
            "protein": 10.3,
            "carbs": 79.8,
            "fat": 2.9,
            "fiber": 3.0,
            "sodium": 1357,
        },
        "portions": [
            {"id": "portion-1", "name": "100g", "grams": 100, "is_default": True, "is_metric": True},
            {"id": "portion-2", "name": "1 oz", "grams": 28.35, "is_metric": False},
        ],
        "dietary_info": {
            "vegetarian": True,
            "vegan": True,
            "gluten_free": False,
            "dairy_free": True,
            "nut_free": True,
            "allergens": ["wheat"],
            "tags": [],
        },
        "search_terms": ["pretzels", "snack", "salty"],
        "verified": True,
        "last_updated": _UPDATED,
    },
    {
        "id": "soy-sauce",
        "name": "Soy Sauce",
        "category": "condiments",
        "nutrition": {
            "calories": 53,
            "protein": 8.1,
            "carbs": 4.9,
            "fat": 0.6,
            "sodium": 5493,
        },
        "portions": [
            {"id": "portion-1", "name": "100g", "grams": 100, "is_default": True, "is_metric": True},
            {"id": "portion-2", "name": "1 tbsp", "grams": 16},
            {"id": "portion-3", "name": "1 tsp", "grams": 5.3},
        ],
        "dietary_info": {
            "vegetarian": True,
            "vegan": True,
            "gluten_free": False,
            "dairy_free": True,
            "nut_free": True,
            "allergens": ["soy", "wheat"],
            "tags": [],
        },
        "search_terms": ["soy sauce", "sauce", "soy"],
        "verified": True,
        "last_updated": _UPDATED,
    },
    # Supplements
    {
        "id": "whey-protein-powder",
        "name": "Whey Protein Powder",
        "category": "supplements",
        "nutrition": {
            "calories": 400,
            "protein": 80.0,
            "carbs": 8.0,
            "fat": 6.0,
            "calcium": 500,
            "sodium": 200,
        },
        "portions": [
            {"id": "portion-1", "name": "100g", "grams": 100, "is_default": True, "is_metric": True},
            {"id": "portion-2", "name": "1 scoop", "grams": 30, "description": "Standard scoop"},
        ],
        "dietary_info": {
            "vegetarian": True,
            "vegan": False,
            "gluten_free": True,
            "dairy_free": False,
            "nut_free": True,
            "allergens": ["milk"],
            "tags": ["high_protein"],
        },
        "search_terms": ["whey", "protein powder", "shake", "supplement"],
        "verified": True,
        "last_updated": _UPDATED,
    },
]
