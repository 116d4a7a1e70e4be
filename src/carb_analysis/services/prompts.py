"""Prompt templates for meal and recipe carb analysis."""

_COMPONENT_SCHEMA = """\
  "components": [
    {
      "description": string,
      "estimatedWeightGrams": number,  // grams
      "carbPercentage": number,        // percentage as whole number (e.g., 23)
      "carbContentGrams": number       // net carbs in grams
    }
  ],
  "totalCarbGrams": number,            // sum of all components' carbContentGrams
  "confidence": integer,               // 1-9 (0 if noContent is true)"""

_JSON_RULES = """\
- Use grams for weights and net carbohydrate content. Prefer integers where reasonable.
- Express carbPercentage as a whole number (e.g., 23 for 23%).
- Ensure the JSON is syntactically valid and parseable.
- Do not include any text before or after the JSON."""

_RECIPE_INGREDIENT_STEPS = """\
For EACH ingredient in the recipe:
- Identify the ingredient name
- Estimate the weight in grams (for raw ingredients as listed in the recipe)
- Determine the carbohydrate percentage for that ingredient
- Calculate the net carb content in grams

Then calculate the total net carbohydrates for the ENTIRE RECIPE \
(sum of all ingredient carb contents)."""

MEAL_PROMPT = f"""\
Analyze the images showing different perspectives of the same meal.

FIRST: Check if the images contain any food. If NO food is visible in any of the \
images, return:
{{
  "noContent": true,
  "components": [],
  "totalCarbGrams": 0,
  "confidence": 0,
  "mealSummary": "No food detected"
}}

Otherwise identify every visible food component and estimate its weight, \
carbohydrate percentage and net carb content.

Return ONLY valid JSON (no markdown fences, no extra commentary). Use this exact \
schema and key names:
{{
  "noContent": boolean,                // true if no food detected, false otherwise
{_COMPONENT_SCHEMA}
  "mealSummary": string                // one-line description 3-5 words
}}

Rules:
- Only calculate net carbs for food that is explicitly visible in the images. If \
only part of a plate or meal is shown in the frame, only estimate the visible \
portion. Do NOT guess the rest
- For cooked foods (pasta, rice, beans, lentils, vegetables, etc.), use the weight \
and carb percentage of the food in its COOKED form, not raw
{_JSON_RULES}
- Assume the images depict the same meal from different angles.
- Use the weight of edible parts of food components and also name them that way \
e.g. Mango (edible part)
- Set noContent to true ONLY if no food is visible in the images"""

RECIPE_PHOTO_PROMPT = f"""\
Analyze this recipe image and extract detailed ingredient information.

FIRST: Check if the image contains a recipe. If NO recipe is visible (e.g., just \
random objects, landscape, people), return:
{{
  "noContent": true,
  "components": [],
  "totalCarbGrams": 0,
  "confidence": 0,
  "recipeDescription": "No recipe detected"
}}

If a recipe IS visible:
{_RECIPE_INGREDIENT_STEPS}

Consider all visible ingredients and their quantities. If quantities are missing \
or unclear, estimate based on typical recipe proportions and indicate lower \
confidence.

Return ONLY valid JSON (no markdown fences, no extra commentary). Use this exact \
schema:
{{
  "noContent": boolean,                // true if no recipe detected, false otherwise
{_COMPONENT_SCHEMA}
  "recipeDescription": string          // one-line description 3-5 words
}}

Rules:
{_JSON_RULES}
- Ensure totalCarbGrams equals the sum of all component carbContentGrams.
- If text is unclear or partially visible, reduce confidence accordingly
- Always use NET carbs
- Set noContent to true ONLY if no recipe is visible in the image"""

RECIPE_LINK_PROMPT = f"""\
Analyze the recipe from the provided page content and extract detailed ingredient \
information.

FIRST: Check if the webpage contains a recipe. If the content is NOT a recipe \
(e.g., blog post, article, product page, error page, or webpage is inaccessible), \
return:
{{
  "noContent": true,
  "contentError": string,              // one of: "not_a_recipe", "inaccessible"
  "components": [],
  "totalCarbGrams": 0,
  "confidence": 0,
  "recipeDescription": "No recipe found"
}}

If a recipe IS found:
{_RECIPE_INGREDIENT_STEPS}

Return ONLY valid JSON (no markdown fences, no extra commentary). Use this exact \
schema:
{{
  "noContent": boolean,                // true if no recipe or inaccessible
  "contentError": string,              // "not_a_recipe" or "inaccessible"
{_COMPONENT_SCHEMA}
  "recipeDescription": string          // one-line description 3-5 words
}}

Rules:
{_JSON_RULES}
- Ensure totalCarbGrams equals the sum of all component carbContentGrams.
- If ingredients or quantities are unclear or missing, reduce confidence accordingly
- Set noContent to true and contentError to "not_a_recipe" if the content doesn't \
contain a recipe
- Set noContent to true and contentError to "inaccessible" if the page content \
suggests the page couldn't be accessed
- Always use NET carbs"""


def build_meal_prompt(user_note: str | None = None) -> str:
    """Return the meal prompt, appending a non-blank user note."""
    if user_note is None or not user_note.strip():
        return MEAL_PROMPT
    return f"{MEAL_PROMPT}\n\nIMPORTANT USER NOTE: {user_note.strip()}"


def build_recipe_photo_prompt() -> str:
    return RECIPE_PHOTO_PROMPT


def build_recipe_link_prompt(page_text: str) -> str:
    """Return the recipe-link prompt with the fetched page text inlined."""
    return (
        f"{RECIPE_LINK_PROMPT}\n\n"
        "Use the following page content as the ONLY source of truth for the "
        "recipe. If it doesn't contain a recipe, respond with confidence: 0.\n"
        f'PAGE CONTENT:\n"""\n{page_text}\n"""\n'
    )
