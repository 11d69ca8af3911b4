import os
import sys

import yaml
from dotenv import load_dotenv
from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.theme import Theme

from lore_parser.actions import ACTIONS
from lore_parser.config import load_config, save_config
from lore_parser.errors import GrammarError
from lore_parser.grammar import load_grammar
from lore_parser.lexer import describe_tokens
from lore_parser.listener import Listener
from lore_parser.world import load_world

# 1. SETUP THEME
custom_theme = Theme({
    "info": "bold #b0d8e3",       # Pale Cyan
    "text": "default",            # Adaptive
    "dim": "dim",                 # Grey
    "warning": "bold #ffafaf",    # Soft red
    "success": "bold #a3be8c",    # Soft green
})

load_dotenv()
console = Console(theme=custom_theme)

EXIT_COMMANDS = ["quit", "exit", "menu"]


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def build_listener(config):
    """Loads the world and the grammar named in the config and wires a Listener."""
    world = load_world(config['world_file'])
    grammar = load_grammar(config['grammar_file'], ACTIONS, world)
    listener = Listener(grammar, articles=config['articles'], not_understood=config['not_understood'])
    return world, listener


# ============================================
# DEBUG OUTPUT
# ============================================
def render_trace(interpretation):
    """One row per rule the Listener tried for this command."""
    table = Table(box=None, show_header=True, header_style="dim")
    table.add_column("Rule")
    table.add_column("Outcome")
    table.add_column("Detail", style="dim")

    for match in interpretation.trace:
        pattern = escape(describe_tokens(match.rule.tokens))
        if match.ok:
            params = ", ".join(getattr(p, 'name', str(p)) for p in match.params)
            table.add_row(pattern, "[success]MATCH[/success]", escape(f"{match.rule.action_name}({params})"))
        else:
            detail = ", ".join(f"{k}={v}" for k, v in match.details.items())
            if match.leftover:
                detail = f"{detail} | left: {' '.join(match.leftover)}".strip(" |")
            table.add_row(pattern, f"[warning]{match.reason}[/warning]", escape(detail))

    if not interpretation.trace:
        table.add_row("-", f"[warning]{interpretation.reason}[/warning]", "")

    return Panel(
        table,
        title=escape(f"[DEBUG: Words {interpretation.words}]"),
        border_style="dim"
    )


# ============================================
# ONE TURN
# ============================================
def run_command(listener, command, out=None, debug=False):
    out = out or console
    interpretation = listener.interpret(command)

    if debug:
        out.print(render_trace(interpretation))

    if interpretation.matched:
        out.print(Panel(escape(str(interpretation.result)), border_style="success"))
    else:
        out.print(Panel(escape(listener.not_understood), border_style="warning"))
    return interpretation


def show_welcome_screen(config):
    clear_screen()

    welcome_md = Markdown(
        "# LORE-PARSER\n\n"
        "Type what you want to do. The grammar decides if it makes sense.\n\n"
        "> *The grammar is the whole game.*"
    )

    console.print(Panel(
        welcome_md,
        border_style="info",
        padding=(1, 2),
        width=60
    ))

    debug_state = "On" if config.get('debug_mode', False) else "Off"
    menu_options = [
        ("1", "Start Playing"),
        ("D", f"Toggle Debug Mode (current: {debug_state})"),
        ("2", "Quit"),
    ]

    console.print("\n[dim]Select an option:[/dim]\n")
    for key, label in menu_options:
        console.print(f" [[info]{key}[/info]] {label}")

    print()
    return Prompt.ask(" >", choices=["1", "2", "D"], default="1")


def toggle_debug(config):
    config['debug_mode'] = not config.get('debug_mode', False)
    save_config(config)
    console.print(Panel(
        f"[info]DEBUG MODE:[/][bold]{' ON' if config['debug_mode'] else ' OFF'}[/bold]",
        border_style="info"
    ))


# ============================================
# GAME LOOP
# ============================================
def start_game(config):
    clear_screen()

    try:
        world, listener = build_listener(config)
    except FileNotFoundError as e:
        console.print(Panel(f"[warning]ERROR: Game data not found.[/] Missing file: {escape(str(e))}", border_style="warning"))
        return
    except yaml.YAMLError as e:
        console.print(Panel(f"[warning]YAML STRUCTURE ERROR:[/]\nCheck your grammar and world files for indentation or syntax errors.\nDetails: {escape(str(e))}", border_style="warning"))
        return
    except GrammarError as e:
        console.print(Panel(f"[warning]GRAMMAR ERROR:[/]\n{escape(str(e))}", border_style="warning"))
        return
    except Exception as e:
        console.print(Panel(f"[warning]CRITICAL LOAD ERROR:[/]\nFailed to load game data.\nDetails: {escape(str(e))}", border_style="warning"))
        return

    scene = world.get_scene()
    console.print(Panel(f"[bold blue]{world.title}[/bold blue]", title="GAME STARTED", border_style="info"))
    console.print(f"\n[bold]SCENE: {scene.name}[/bold]")
    console.print(f"\n{scene.description}")
    console.print("[dim]Type 'quit' to return to menu, 'debug' to toggle the rule trace.[/dim]\n")

    while True:
        command = Prompt.ask("[info]>[/info]")

        if command.lower().strip() in EXIT_COMMANDS:
            break
        if command.lower().strip() == "debug":
            toggle_debug(config)
            continue

        run_command(listener, command, debug=config.get('debug_mode', False))


# ============================================
# MAIN
# ============================================
def main():
    while True:
        config = load_config()
        choice = show_welcome_screen(config)

        if choice == "1":
            start_game(config)
        elif choice.upper() == "D":
            toggle_debug(config)
        elif choice == "2":
            console.print("\nGoodbye.")
            sys.exit()


if __name__ == "__main__":
    main()
