from typing import List, Optional
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from mixmaster.models import ActiveTab, BrowserState, RecipeRecord
from mixmaster.services.browser_store import visible_recipes
from mixmaster.services.ingredient_service import missing_ingredients

FILTER_LABELS = {
    "all": "All",
    "alcoholic": "Alcoholic",
    "non-alcoholic": "Non-Alcoholic",
    "can-make": "Can Make ✨",
}

class ConsoleRenderer:
    """Draws BrowserState to a rich console"""
    
    def __init__(self, console: Console = None):
        self.console = console or Console()
    
    def render(self, state: BrowserState):
        if state.active_tab == ActiveTab.MY_BAR:
            self.render_bar(state)
        elif state.active_tab == ActiveTab.FAVORITES:
            self.render_favorites(state)
        else:
            self.render_cocktails(state)
        
        if state.selected_recipe:
            self.render_detail(state.selected_recipe, state)
    
    def render_cocktails(self, state: BrowserState):
        self.console.print(self._filter_bar(state))
        
        if state.last_error:
            self.console.print(f"[bold yellow]⚠[/bold yellow] Showing previous results: {state.last_error}")
        
        if state.loading:
            self.console.print("[bold blue]Loading cocktails...[/bold blue]")
            return
        
        recipes = visible_recipes(state)
        if not recipes:
            self.console.print("[bold yellow]No cocktails found[/bold yellow]")
            return
        
        title = f"Cocktails{f' matching {state.search_term!r}' if state.search_term else ''}"
        self.console.print(self.recipe_table(recipes, state, title=title))
    
    def render_bar(self, state: BrowserState):
        self.console.print("[bold white]My Bar[/bold white]")
        self.console.print("Add ingredients you have on hand")
        
        if not state.inventory:
            self.console.print("[bold yellow]No ingredients added yet. Add some to see what you can make![/bold yellow]")
            return
        
        for ingredient in state.inventory:
            self.console.print(f"  🍾 {ingredient}")
    
    def render_favorites(self, state: BrowserState):
        favorites = state.favorites
        if not favorites:
            self.console.print("[bold yellow]No favorites yet. Star any cocktail to save it![/bold yellow]")
            return
        
        self.console.print(self.recipe_table(favorites, state, title="Favorites"))
    
    def recipe_table(self, recipes: List[RecipeRecord], state: Optional[BrowserState] = None,
                     title: str = "Cocktails") -> Table:
        table = Table(title=title)
        table.add_column("ID", style="cyan")
        table.add_column("Name", style="white")
        table.add_column("Category", style="green")
        table.add_column("Alcoholic", style="yellow")
        table.add_column("❤", style="red")
        
        for recipe in recipes:
            is_favorite = state.is_favorite(recipe.id) if state else False
            table.add_row(
                recipe.id,
                recipe.name,
                recipe.category or "N/A",
                recipe.alcoholic_label or "N/A",
                "❤️" if is_favorite else ""
            )
        
        return table
    
    def render_detail(self, recipe: RecipeRecord, state: Optional[BrowserState] = None):
        self.console.print(self.detail_panel(recipe, state))
    
    def detail_panel(self, recipe: RecipeRecord, state: Optional[BrowserState] = None) -> Panel:
        parts = []
        if recipe.image_ref:
            parts.append(Text(recipe.image_ref, style="dim"))
        parts.append(Text(f"{recipe.category} • {recipe.alcoholic_label}", style="bright_black"))
        
        ingredients = Table(title="Ingredients", show_header=False, box=None)
        ingredients.add_column("Ingredient")
        ingredients.add_column("Measure", style="bright_black")
        for line in recipe.ingredient_lines:
            ingredients.add_row(line.name, line.measure)
        parts.append(ingredients)
        
        if state is not None and state.inventory:
            missing = missing_ingredients(recipe, state.inventory)
            if missing:
                parts.append(Text(f"Missing from your bar: {', '.join(missing)}", style="yellow"))
            else:
                parts.append(Text("You can make this with your bar ✨", style="green"))
        
        parts.append(Text("Instructions", style="bold"))
        parts.append(Text(recipe.instructions))
        
        if recipe.glass:
            parts.append(Text("Glass", style="bold"))
            parts.append(Text(recipe.glass))
        
        return Panel(Group(*parts), title=f"[bold]{recipe.name}[/bold]", expand=False)
    
    def _filter_bar(self, state: BrowserState) -> Text:
        text = Text()
        for value, label in FILTER_LABELS.items():
            style = "bold black on yellow" if state.active_filter.value == value else "bright_black"
            text.append(f" {label} ", style=style)
            text.append(" ")
        return text
