RECIPES_DATA = [
    {
        "name": "Grilled Chicken Salad",
        "description": "A healthy and protein-rich salad with grilled chicken breast",
        "ingredients": "Chicken breast 200g, Mixed greens 100g, Cherry tomatoes 50g, Cucumber 50g, Olive oil 1 tbsp, Lemon juice 1 tbsp",
        "instructions": "1. Grill chicken breast until cooked through. 2. Chop vegetables. 3. Mix greens, vegetables in a bowl. 4. Slice chicken and add to salad. 5. Drizzle with olive oil and lemon juice.",
        "calories": 350,
        "protein": 35.0,
        "carbohydrates": 15.0,
        "fat": 18.0,
        "preparation_time": 25,
        "difficulty": "Easy",
        "category": "Salad",
        "tags": "high-protein,low-carb,gluten-free",
    },
    {
        "name": "Quinoa Buddha Bowl",
        "description": "A nutritious bowl packed with quinoa, vegetables, and tahini dressing",
        "ingredients": "Quinoa 100g, Chickpeas 100g, Sweet potato 100g, Kale 50g, Avocado 50g, Tahini 2 tbsp",
        "instructions": "1. Cook quinoa according to package directions. 2. Roast sweet potato cubes. 3. Sauté kale. 4. Arrange all ingredients in a bowl. 5. Drizzle with tahini dressing.",
        "calories": 480,
        "protein": 18.0,
        "carbohydrates": 65.0,
        "fat": 20.0,
        "preparation_time": 35,
        "difficulty": "Medium",
        "category": "Bowl",
        "tags": "vegan,high-fiber,gluten-free",
    },
    {
        "name": "Salmon with Steamed Broccoli",
        "description": "Omega-3 rich salmon fillet with perfectly steamed broccoli",
        "ingredients": "Salmon fillet 200g, Broccoli 150g, Garlic 2 cloves, Lemon 1, Olive oil 1 tbsp",
        "instructions": "1. Season salmon with salt, pepper, and lemon juice. 2. Bake salmon at 180°C for 15 minutes. 3. Steam broccoli until tender. 4. Sauté garlic in olive oil and toss with broccoli.",
        "calories": 400,
        "protein": 40.0,
        "carbohydrates": 10.0,
        "fat": 22.0,
        "preparation_time": 20,
        "difficulty": "Easy",
        "category": "Main Course",
        "tags": "high-protein,omega-3,low-carb,gluten-free",
    },
]
