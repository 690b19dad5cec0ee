"""
Pytest configuration and shared fixtures.

Fixtures defined here are available to all tests.
"""

import os
import sys
import pytest
from pathlib import Path

# Add backend to path
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Set test environment
os.environ["TESTING"] = "true"
os.environ.pop("OPENAI_API_KEY", None)


WEEK_DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


# =============================================================================
# Generation Fakes
# =============================================================================


class FakeGenerationService:
    """Deterministic stand-in for the generation service.

    ``responses`` maps an output model to the value to return (a dict or model)
    or an exception to raise. Every call is recorded.
    """

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.calls = []

    async def generate(self, instruction, output_schema):
        self.calls.append((instruction, output_schema))
        response = self.responses[output_schema]
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def fake_service(sample_diet_plan, sample_shopping_list):
    """Fake service answering every use case with fixture data."""
    from app.models import ChatAnswer, DietPlan, RecipeSuggestions, ShoppingList

    return FakeGenerationService({
        DietPlan: sample_diet_plan,
        ShoppingList: sample_shopping_list,
        RecipeSuggestions: {
            "recipes": [
                "Overnight oats with berries: oats soaked in almond milk, topped with blueberries.",
                "Lemon herb salmon: baked salmon with quinoa and steamed broccoli.",
            ],
        },
        ChatAnswer: {"answer": "Aim for a palm-sized portion of protein at each meal."},
    })


@pytest.fixture
def gateway(fake_service):
    """Gateway backed by the fake service."""
    from app.services.gateway import NutritionGateway
    return NutritionGateway(service=fake_service)


# =============================================================================
# App Fixtures
# =============================================================================


@pytest.fixture
def app():
    """FastAPI test application."""
    from app.main import app
    return app


@pytest.fixture
def client(app, gateway):
    """Sync test client with the gateway dependency pointed at the fake."""
    from fastapi.testclient import TestClient
    from app.services.gateway import get_gateway

    app.dependency_overrides[get_gateway] = lambda: gateway
    yield TestClient(app)
    app.dependency_overrides.clear()


# =============================================================================
# Sample Data Fixtures
# =============================================================================


@pytest.fixture
def sample_profile():
    """Valid raw health profile as submitted by the web form."""
    return {
        "bmi": 22,
        "age": 30,
        "medicalHistory": "None",
        "dietaryPreferences": "",
    }


@pytest.fixture
def make_diet_plan():
    """Build a raw diet plan dict with the given day labels."""
    def _make(days=None):
        days = WEEK_DAYS if days is None else days
        return {
            "summary": "A balanced plan to keep your energy steady all week.",
            "macronutrientDistribution": {"carbs": 45, "protein": 30, "fat": 25},
            "weeklyPlan": [
                {
                    "day": day,
                    "meals": {
                        "breakfast": f"{day} oatmeal with berries",
                        "lunch": f"{day} grilled chicken salad",
                        "dinner": f"{day} baked salmon with quinoa",
                        "snacks": "Greek yogurt",
                    },
                    "dailyTotal": "~1,900 kcal; 140g protein, 210g carbs, 55g fat",
                }
                for day in days
            ],
        }
    return _make


@pytest.fixture
def sample_diet_plan(make_diet_plan):
    """Seven-day raw diet plan."""
    return make_diet_plan()


@pytest.fixture
def sample_shopping_list():
    """Raw shopping list as the generation service returns it."""
    return {
        "shoppingList": [
            {
                "category": "Produce",
                "items": [
                    {"item": "Blueberries", "quantity": "2 pints"},
                    {"item": "Broccoli", "quantity": "3 heads"},
                ],
            },
            {
                "category": "Protein",
                "items": [
                    {"item": "Chicken Breast", "quantity": "2 lbs"},
                    {"item": "Salmon Fillets"},
                ],
            },
        ],
    }
