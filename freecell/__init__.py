"""Console Freecell solitaire."""
