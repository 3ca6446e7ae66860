"""UI layer: the store and the widgets that consume it."""
