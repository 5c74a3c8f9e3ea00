"""
PantrySure FastAPI application.

Endpoints:
    GET    /                             Health check
    GET    /ingredients                  List stocked ingredients
    POST   /ingredients                  Stock a new ingredient
    GET    /ingredients/{name}           Get one ingredient
    DELETE /ingredients/{name}           Remove an ingredient
    POST   /ingredients/{name}/restock   Add to an ingredient's quantity
    POST   /ingredients/{name}/consume   Use some of an ingredient
    GET    /inventory/value              Value of expired / valid stock
    POST   /inventory/purge-expired      Remove expired ingredients
    GET    /recipes                      List the cookbook
    POST   /recipes                      Add a recipe
    GET    /recipes/{name}               Get one recipe
    DELETE /recipes/{name}               Remove a recipe
    GET    /recipes/{name}/cookable      Ready / missing / expired / short breakdown
    POST   /recipes/{name}/cook          Cook: consume stock, drop exhausted items
    GET    /suggestions                  Recipes whose ingredients are all stocked

State lives in one PantrySession on app.state; nothing is persisted.
"""
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from typing import List
import logging
from dotenv import load_dotenv
from pathlib import Path

# Load env vars
load_dotenv(Path(__file__).parent / ".env")

from pantry.config import get_cors_origins, get_log_level, log_config
from pantry.errors import ValidationError
from pantry.models.ingredient import Ingredient
from pantry.models.recipe import Recipe
from pantry.session import PantrySession

# Logger
logging.basicConfig(level=get_log_level())
logger = logging.getLogger(__name__)

# Initialize App
app = FastAPI(title="PantrySure API")
app.state.session = PantrySession()

log_config()

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Request Models ---
class IngredientBody(BaseModel):
    name: str
    quantity: float
    unit: int = Field(description="0 = unit, 1 = gram, 2 = liter")
    price: float
    expiration_date: str = Field(description="yyyy-MM-dd")


class AmountBody(BaseModel):
    amount: float


class RequirementBody(BaseModel):
    name: str
    quantity: float
    unit: int


class RecipeBody(BaseModel):
    name: str
    description: str
    instructions: str
    servings: int
    ingredients: List[RequirementBody]


# --- Helper Functions ---

def _session(request: Request) -> PantrySession:
    return request.app.state.session


def _bad_request(e: ValidationError) -> HTTPException:
    logger.info("VALIDATION_ERROR %s", e)
    return HTTPException(status_code=400, detail=str(e))


def _ingredient_or_404(session: PantrySession, name: str) -> Ingredient:
    try:
        ingredient = session.inventory.get(name)
    except ValidationError as e:
        raise _bad_request(e)
    if ingredient is None:
        raise HTTPException(status_code=404, detail=f"Ingredient {name!r} doesn't exist")
    return ingredient


def _recipe_or_404(session: PantrySession, name: str) -> Recipe:
    try:
        recipe = session.cookbook.get(name)
    except ValidationError as e:
        raise _bad_request(e)
    if recipe is None:
        raise HTTPException(status_code=404, detail=f"Recipe {name!r} doesn't exist")
    return recipe


@app.exception_handler(Exception)
async def _unhandled_error(request: Request, exc: Exception):
    logger.error("Request failed path=%s: %s", request.url.path, exc, exc_info=True)
    return JSONResponse(status_code=500, content={"detail": str(exc)})


# --- Endpoints ---

@app.get("/")
def health_check():
    return {"status": "ok", "service": "PantrySure"}


@app.get("/ingredients")
def list_ingredients(request: Request):
    return [ing.to_dict() for ing in _session(request).inventory.iterate()]


@app.post("/ingredients", status_code=201)
def add_ingredient(body: IngredientBody, request: Request):
    session = _session(request)
    try:
        ingredient = Ingredient.stocked(
            body.name, body.quantity, body.unit, body.price, body.expiration_date,
        )
    except ValidationError as e:
        raise _bad_request(e)
    if ingredient.name in session.inventory:
        raise HTTPException(status_code=409, detail=f"Ingredient {ingredient.name!r} is already in storage")
    session.inventory.add(ingredient)
    return ingredient.to_dict()


@app.get("/ingredients/{name}")
def get_ingredient(name: str, request: Request):
    return _ingredient_or_404(_session(request), name).to_dict()


@app.delete("/ingredients/{name}")
def remove_ingredient(name: str, request: Request):
    session = _session(request)
    ingredient = _ingredient_or_404(session, name)
    session.inventory.remove(ingredient.name)
    return {"status": "ok", "removed": ingredient.name}


@app.post("/ingredients/{name}/restock")
def restock_ingredient(name: str, body: AmountBody, request: Request):
    ingredient = _ingredient_or_404(_session(request), name)
    try:
        ingredient.restock(body.amount)
    except ValidationError as e:
        raise _bad_request(e)
    return ingredient.to_dict()


@app.post("/ingredients/{name}/consume")
def consume_ingredient(name: str, body: AmountBody, request: Request):
    ingredient = _ingredient_or_404(_session(request), name)
    try:
        ingredient.consume(body.amount)
    except ValidationError as e:
        raise _bad_request(e)
    return ingredient.to_dict()


@app.get("/inventory/value")
def inventory_value(request: Request):
    return _session(request).engine.value_inventory().to_dict()


@app.post("/inventory/purge-expired")
def purge_expired(request: Request):
    return _session(request).engine.purge_expired().to_dict()


@app.get("/recipes")
def list_recipes(request: Request):
    return [recipe.to_dict() for recipe in _session(request).cookbook.iterate()]


@app.post("/recipes", status_code=201)
def add_recipe(body: RecipeBody, request: Request):
    session = _session(request)
    try:
        recipe = Recipe.from_requirements(
            body.name,
            body.description,
            body.instructions,
            body.servings,
            [Ingredient.requirement(r.name, r.quantity, r.unit) for r in body.ingredients],
        )
    except ValidationError as e:
        raise _bad_request(e)
    # Cookbook.add overwrites, so existence is checked here
    if recipe.name in session.cookbook:
        raise HTTPException(status_code=409, detail=f"Recipe {recipe.name!r} is already in the book")
    session.cookbook.add(recipe)
    return recipe.to_dict()


@app.get("/recipes/{name}")
def get_recipe(name: str, request: Request):
    return _recipe_or_404(_session(request), name).to_dict()


@app.delete("/recipes/{name}")
def remove_recipe(name: str, request: Request):
    session = _session(request)
    recipe = _recipe_or_404(session, name)
    session.cookbook.remove(recipe.name)
    return {"status": "ok", "removed": recipe.name}


@app.get("/recipes/{name}/cookable")
def check_cookable(name: str, request: Request):
    session = _session(request)
    recipe = _recipe_or_404(session, name)
    return session.engine.check_cookable(recipe).to_dict()


@app.post("/recipes/{name}/cook")
def cook_recipe(name: str, request: Request):
    session = _session(request)
    recipe = _recipe_or_404(session, name)
    try:
        result = session.engine.cook(recipe)
    except ValidationError as e:
        # cook is not atomic: earlier ingredients may already be consumed
        logger.warning("COOK_PARTIAL recipe=%s error=%s", recipe.name, e)
        raise HTTPException(status_code=400, detail=str(e))
    return result.to_dict()


@app.get("/suggestions")
def suggestions(request: Request):
    return {"recipes": _session(request).engine.suggest_cookable()}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app:app", host="0.0.0.0", port=8000, reload=True)
