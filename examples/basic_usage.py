"""
Basic usage examples for PairPicker.
"""

from pair_picker import Element, InMemoryHost, PairPicker


def example_only_two_walls():
    """
    Example: exactly two walls exist, no prompting needed.
    """
    print("\n" + "=" * 60)
    print("Example 1: Only two walls")
    print("=" * 60)

    host = InMemoryHost(
        elements=[
            Element(element_id="W1", category="Wall", name="North"),
            Element(element_id="W2", category="Wall", name="South"),
            Element(element_id="D1", category="Door"),
        ]
    )
    result = PairPicker(host, "Wall").pick()
    print(f"\nOutcome: {result.outcome.value} via {result.source.value}")


def example_scripted_session():
    """
    Example: five walls, nothing pre-selected, two scripted picks.
    """
    print("\n" + "=" * 60)
    print("Example 2: Scripted interactive picks")
    print("=" * 60)

    walls = [Element(element_id=f"W{i}", category="Wall") for i in range(1, 6)]
    host = InMemoryHost(elements=walls, picks=["W4", "W2"])

    picker = PairPicker(host, "Wall")
    result = picker.pick()
    print(f"\nOutcome: {result.outcome.value}")
    print(f"Selected: {[e.element_id for e in picker.selected]}")


if __name__ == "__main__":
    example_only_two_walls()
    example_scripted_session()
