# This package contains the pricing recommendation engine used by the dashboard and demo API.
# It exists so recommendation models, providers, and page-level derivations live behind one import path.
# The modules separate configuration, data contracts, generation, and analysis for easier testing.
