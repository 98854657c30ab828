#!/usr/bin/env python3
"""
Interactive REPL for the series trig calculator.
Type expressions like 'sin(pi/4)', 'cos(0.5)', 'sind(90)' or 'cosd(-855)'.
Type 'quit' to exit.
"""
from trigonometry_engine import TrigonometryEngine
from utils.precision_manager import get_tolerance, presets, set_tolerance
from utils.trace_helpers import format_traceback


def handle_tolerance(user_input: str) -> None:
    """Show or change the default tolerance ('tolerance' / 'tolerance N')."""
    parts = user_input.split()
    if len(parts) == 1:
        print(f"Current tolerance: {get_tolerance()}")
    elif len(parts) == 2:
        try:
            set_tolerance(float(parts[1]))
            print(f"Tolerance set to {get_tolerance()}")
        except ValueError as e:
            print(f"Error: {e}")
    else:
        print("Usage: tolerance [N]")


def main():
    """Run the interactive REPL."""
    print("=" * 80)
    print("Series trig calculator REPL")
    print("Type expressions (e.g., 'sin(pi/2)', 'cos(pi)', 'sind(45)', 'cosd(360)')")
    print("Type 'trace' to toggle traceback display")
    print("Type 'tolerance' to show the current tolerance")
    print("Type 'tolerance N' where N is one of", presets(), "to change it")
    print("Type 'quit' to exit")

    engine = TrigonometryEngine()
    show_trace = False

    while True:
        try:
            user_input = input("trig> ").strip()
            if not user_input:
                continue
            if user_input.lower() == 'quit':
                print("Goodbye!")
                break
            if user_input.lower() == 'trace':
                show_trace = not show_trace
                print(f"Traceback display: {'ON' if show_trace else 'OFF'}")
                continue
            if user_input.split()[0].lower() == 'tolerance':
                handle_tolerance(user_input)
                continue

            seen = len(engine.traceback_info)
            result = engine.compute(user_input)
            print(f"Result: {result}")

            if show_trace:
                print("\nTracebacks:")
                for line in format_traceback(engine.traceback_info[seen:]):
                    print(f"  {line}")

        except (KeyboardInterrupt, EOFError):
            print("\nGoodbye!")
            break
        except Exception as e:
            print(f"Error: {e}")


if __name__ == '__main__':
    main()
