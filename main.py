#!/usr/bin/env python3
"""
MixMaster - Cocktail Catalog Browser

Search TheCocktailDB, keep track of what is in your bar, and see which
cocktails you can make right now. Everything lives for one session only.
"""

import asyncio
from typing import List, Optional, Tuple

import click
from rich.console import Console

from mixmaster.config import config
from mixmaster.models import ActiveFilter, ActiveTab, RecipeRecord
from mixmaster.rendering import ConsoleRenderer
from mixmaster.services.browser_store import (
    AddInventoryItem,
    ChangeFilter,
    ChangeTab,
    DismissDetail,
    RemoveInventoryItem,
    SelectRecipe,
    Store,
    ToggleFavorite,
    ToggleInventoryItem,
    visible_recipes,
)
from mixmaster.services.recipe_source import CocktailDBSource
from mixmaster.services.search_dispatcher import SearchDispatcher
from mixmaster.utils import logger, setup_logger

console = Console()

FILTER_VALUES = [f.value for f in ActiveFilter]

SESSION_HELP = """[bold yellow]Commands:[/bold yellow]
  s <term>         Search cocktails (empty term lists everything)
  f <filter>       Filter: all, alcoholic, non-alcoholic, can-make
  add <name>       Add an ingredient to your bar
  rm <name>        Remove an ingredient from your bar
  t <name>         Toggle an ingredient in your bar
  fav <id>         Star or unstar a cocktail
  show <id>        Show cocktail details
  close            Close the detail view
  tab <name>       Switch tab: cocktails, bar, favorites
  help             Show this help
  q                Quit"""

@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
def cli(verbose: bool):
    """MixMaster - browse cocktails and find what you can make"""
    config.create_directories()
    setup_logger('DEBUG' if verbose else None, config.LOG_FILE)

    if verbose:
        logger.info("Verbose logging enabled")

@cli.command()
@click.option('--term', '-t', default='', help='Initial search term')
@click.option('--have', '-i', multiple=True, help='Ingredient already in your bar (repeatable)')
def browse(term: str, have: Tuple[str, ...]):
    """Browse cocktails interactively"""
    console.print("[bold blue]🍸 MixMaster[/bold blue]")
    asyncio.run(_run_browse_session(term, list(have)))

async def _run_browse_session(term: str, have: List[str]):
    store = Store()
    renderer = ConsoleRenderer(console)
    store.subscribe(lambda state: logger.debug(
        f"State: {len(state.recipes)} recipes, filter={state.active_filter.value}, "
        f"bar={len(state.inventory)}, favorites={len(state.favorite_ids)}, loading={state.loading}"
    ))

    for name in have:
        store.dispatch(AddInventoryItem(name))

    async with CocktailDBSource() as source:
        dispatcher = SearchDispatcher(store, source)
        await _run_lookup(dispatcher, term)
        renderer.render(store.state)
        console.print(SESSION_HELP)

        while True:
            try:
                line = click.prompt("mixmaster", default="", show_default=False)
            except click.Abort:
                break

            if not await _handle_session_command(line, store, dispatcher, renderer):
                break

    console.print("[bold blue]Cheers! 🍸[/bold blue]")

async def _handle_session_command(line: str, store: Store, dispatcher: SearchDispatcher,
                                  renderer: ConsoleRenderer) -> bool:
    """Apply one line of session input; returns False when the session should end"""
    command, argument = _parse_session_command(line)

    if command in ('q', 'quit', 'exit'):
        return False

    if command in ('help', '?'):
        console.print(SESSION_HELP)
        return True

    if command in ('s', 'search'):
        store.dispatch(ChangeTab(ActiveTab.COCKTAILS))
        await _run_lookup(dispatcher, argument)

    elif command in ('f', 'filter'):
        active_filter = _parse_filter(argument)
        if active_filter is None:
            console.print(f"[bold red]✗[/bold red] Unknown filter '{argument}'. Choose from: {', '.join(FILTER_VALUES)}")
            return True
        store.dispatch(ChangeFilter(active_filter))
        store.dispatch(ChangeTab(ActiveTab.COCKTAILS))

    elif command == 'add':
        store.dispatch(AddInventoryItem(argument))
        store.dispatch(ChangeTab(ActiveTab.MY_BAR))

    elif command in ('rm', 'remove'):
        store.dispatch(RemoveInventoryItem(argument))
        store.dispatch(ChangeTab(ActiveTab.MY_BAR))

    elif command in ('t', 'toggle'):
        store.dispatch(ToggleInventoryItem(argument))
        store.dispatch(ChangeTab(ActiveTab.MY_BAR))

    elif command == 'fav':
        was_favorite = store.state.is_favorite(argument)
        state = store.dispatch(ToggleFavorite(argument))
        if not was_favorite and not state.is_favorite(argument):
            console.print(f"[bold red]✗[/bold red] No cocktail with id '{argument}' in the current results")
            return True
        marker = "🤍 Unstarred" if was_favorite else "❤️  Starred"
        console.print(f"{marker} {argument}")

    elif command == 'show':
        state = store.dispatch(SelectRecipe(argument))
        if state.selected_recipe is None or state.selected_recipe.id != argument:
            console.print(f"[bold red]✗[/bold red] No cocktail with id '{argument}' in the current results")
            return True

    elif command == 'close':
        store.dispatch(DismissDetail())

    elif command == 'tab':
        active_tab = _parse_tab(argument)
        if active_tab is None:
            console.print(f"[bold red]✗[/bold red] Unknown tab '{argument}'. Choose from: cocktails, bar, favorites")
            return True
        store.dispatch(ChangeTab(active_tab))

    elif command:
        console.print(f"[bold red]✗[/bold red] Unknown command '{command}'. Type 'help' for commands.")
        return True

    renderer.render(store.state)
    return True

def _parse_session_command(line: str) -> Tuple[str, str]:
    """Split 'cmd argument text' into a lower-cased command and a trimmed argument"""
    command, _, argument = line.strip().partition(' ')
    return command.lower(), argument.strip()

def _parse_filter(value: str) -> Optional[ActiveFilter]:
    key = value.strip().lower().replace('_', '-').replace(' ', '-')
    if key == 'nonalcoholic':
        key = 'non-alcoholic'
    elif key == 'canmake':
        key = 'can-make'

    try:
        return ActiveFilter(key)
    except ValueError:
        return None

def _parse_tab(value: str) -> Optional[ActiveTab]:
    aliases = {
        'cocktails': ActiveTab.COCKTAILS,
        'bar': ActiveTab.MY_BAR,
        'mybar': ActiveTab.MY_BAR,
        'favorites': ActiveTab.FAVORITES,
        'favs': ActiveTab.FAVORITES,
    }
    return aliases.get(value.strip().lower().replace(' ', ''))

async def _run_lookup(dispatcher: SearchDispatcher, term: str):
    with console.status("Loading cocktails..."):
        dispatcher.change_search_term(term)
        await dispatcher.drain()

    if dispatcher.store.state.last_error:
        console.print(f"[bold red]✗[/bold red] Lookup failed: {dispatcher.store.state.last_error}")

async def _lookup_once(term: str, have: Tuple[str, ...] = (), active_filter: ActiveFilter = ActiveFilter.ALL) -> Store:
    store = Store()
    for name in have:
        store.dispatch(AddInventoryItem(name))
    store.dispatch(ChangeFilter(active_filter))

    async with CocktailDBSource() as source:
        dispatcher = SearchDispatcher(store, source)
        await _run_lookup(dispatcher, term)

    return store

@cli.command()
@click.argument('term', default='')
@click.option('--filter', '-f', 'filter_name', default='all', type=click.Choice(FILTER_VALUES), help='Category filter')
@click.option('--have', '-i', multiple=True, help='Ingredient in your bar, used by --filter can-make (repeatable)')
def search(term: str, filter_name: str, have: Tuple[str, ...]):
    """Search cocktails by name (no term lists the default catalog)"""
    console.print(f"[bold blue]Searching cocktails{f' for {term!r}' if term else ''}...[/bold blue]")

    store = asyncio.run(_lookup_once(term, have, ActiveFilter(filter_name)))
    if store.state.last_error:
        return

    recipes = visible_recipes(store.state)
    if not recipes:
        console.print("[bold yellow]No cocktails found[/bold yellow]")
        return

    renderer = ConsoleRenderer(console)
    console.print(renderer.recipe_table(recipes, store.state, title=f"Cocktails - {filter_name}"))
    console.print(f"[bold green]✓[/bold green] {len(recipes)} of {len(store.state.recipes)} cocktails shown")

@cli.command()
@click.option('--have', '-i', multiple=True, required=True, help='Ingredient in your bar (repeatable)')
@click.option('--term', '-t', default='', help='Only consider cocktails matching this term')
def can_make(have: Tuple[str, ...], term: str):
    """List cocktails you can make from the ingredients you have"""
    console.print(f"[bold blue]Checking what you can make with: {', '.join(have)}[/bold blue]")

    store = asyncio.run(_lookup_once(term, have, ActiveFilter.CAN_MAKE))
    if store.state.last_error:
        return

    recipes = visible_recipes(store.state)
    if not recipes:
        console.print("[bold yellow]⚠[/bold yellow] Nothing you can make yet. Try adding more ingredients.")
        return

    renderer = ConsoleRenderer(console)
    console.print(renderer.recipe_table(recipes, store.state, title="You Can Make"))

@cli.command()
@click.argument('name')
@click.option('--have', '-i', multiple=True, help='Ingredient in your bar, to show what is missing (repeatable)')
def show(name: str, have: Tuple[str, ...]):
    """Show the full recipe for a cocktail"""
    store = asyncio.run(_lookup_once(name, have))
    if store.state.last_error:
        return

    recipe = _pick_recipe(list(store.state.recipes), name)
    if recipe is None:
        console.print(f"[bold yellow]No cocktail found matching '{name}'[/bold yellow]")
        return

    state = store.dispatch(SelectRecipe(recipe.id))
    ConsoleRenderer(console).render_detail(state.selected_recipe, state)

def _pick_recipe(recipes: List[RecipeRecord], name: str) -> Optional[RecipeRecord]:
    """Prefer an exact (case-insensitive) name or id match, else the first result"""
    wanted = name.strip().lower()
    for recipe in recipes:
        if recipe.name.lower() == wanted or recipe.id == name:
            return recipe
    return recipes[0] if recipes else None

if __name__ == '__main__':
    cli()
