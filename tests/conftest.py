"""
Shared HTML pages and recipe documents for the test suite
"""

import json

import pytest


COOKIES_JSONLD = {
    "@context": "https://schema.org",
    "@type": "Recipe",
    "name": "Chocolate Chip Cookies",
    "description": "Chewy cookies with crisp edges.",
    "author": {"@type": "Person", "name": "Sam Baker"},
    "image": ["https://example.com/cookies.jpg", "https://example.com/cookies-2.jpg"],
    "recipeYield": ["24", "24 cookies"],
    "prepTime": "PT15M",
    "cookTime": "PT12M",
    "totalTime": "PT27M",
    "recipeIngredient": [
        "2 1/4 cups all-purpose flour",
        "1 cup butter, softened",
        "2 eggs",
        "2 cups chocolate chips",
    ],
    "recipeInstructions": [
        {"@type": "HowToStep", "text": "Preheat oven to 375F."},
        {"@type": "HowToStep", "text": "Mix flour and butter.", "image": "https://example.com/step2.jpg"},
        {"@type": "HowToStep", "text": "Bake 12 minutes."},
    ],
    "keywords": "cookies, chocolate, dessert, butter",
    "recipeCategory": "Dessert",
    "recipeCuisine": "American",
}


def page(*scripts: str, body: str = "") -> str:
    """HTML document with one JSON-LD script block per argument"""
    blocks = "\n".join(f'<script type="application/ld+json">{s}</script>' for s in scripts)
    return f"<html><head><title>Test</title>{blocks}</head><body>{body}</body></html>"


@pytest.fixture
def make_page():
    return page


@pytest.fixture
def cookies_jsonld():
    return json.loads(json.dumps(COOKIES_JSONLD))


@pytest.fixture
def jsonld_page():
    return page(json.dumps(COOKIES_JSONLD))


@pytest.fixture
def jsonld_array_page():
    breadcrumbs = {"@type": "BreadcrumbList", "itemListElement": []}
    return page(json.dumps([breadcrumbs, COOKIES_JSONLD]))


@pytest.fixture
def microdata_page():
    return """
    <html><body>
      <div itemscope itemtype="https://schema.org/Recipe">
        <h1 itemprop="name">Buttermilk Pancakes</h1>
        <meta itemprop="prepTime" content="PT10M">
        <img itemprop="image" src="https://example.com/pancakes.jpg">
        <span itemprop="recipeYield">4 servings</span>
        <div itemprop="author" itemscope itemtype="https://schema.org/Person">
          <span itemprop="name">Pat Griddle</span>
        </div>
        <ul>
          <li itemprop="recipeIngredient">2 cups flour</li>
          <li itemprop="recipeIngredient">2 cups buttermilk</li>
          <li itemprop="recipeIngredient" content="1 egg">one egg</li>
        </ul>
        <ol>
          <li itemprop="recipeInstructions">Whisk everything together.</li>
          <li itemprop="recipeInstructions">
            <span itemprop="text">Cook on a hot griddle.</span>
          </li>
        </ol>
      </div>
    </body></html>
    """


@pytest.fixture
def plain_page():
    return "<html><body><h1>My trip to Italy</h1><p>No recipe here.</p></body></html>"


@pytest.fixture
def stored_recipe():
    """Stored recipe document mixing text and structured ingredients"""
    return {
        "soustack": "0.1",
        "name": "Weeknight Chicken",
        "yield": {"amount": 4, "unit": "servings", "servings": 4},
        "ingredients": [
            "2 lbs chicken breast",
            {
                "item": "1 1/2 cups rice, rinsed",
                "quantity": {"amount": 1.5, "unit": "cups"},
                "name": "rice",
                "prep": "rinsed",
            },
            {
                "item": "1 tsp salt",
                "quantity": {"amount": 1, "unit": "tsp"},
                "name": "salt",
                "scaling": {"type": "fixed"},
            },
            "a pinch of pepper",
        ],
        "instructions": [
            "Season the chicken.",
            {"step": "Sear until golden.", "image": "https://example.com/sear.jpg"},
        ],
        "tags": ["chicken", "dinner", "easy"],
    }
