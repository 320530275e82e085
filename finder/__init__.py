"""
Recipe Finder core package.

This package contains:
- config: .env loading, Edamam settings and logging setup
- models: Recipe, Nutrient and search response schemas
- errors: NetworkFailure / ResponseFailure taxonomy
- connectors: recipe search API clients
- state: search state holder and fetch status reducer
- cycle: the fetch boundary that turns connector results into messages
- view: pure view model built from the store
"""
