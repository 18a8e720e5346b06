import os
import sys
from datetime import datetime

sys.path.insert(0, os.path.abspath("../../src"))

project = "rlmdp-core"
copyright = f"{datetime.now().year}, rlmdp-core developers"
author = "rlmdp-core developers"
release = "0.1.0a0"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "sphinx.ext.mathjax",
    "sphinx_rtd_theme",
    "sphinx_autodoc_typehints",
    "sphinx_copybutton",
]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

# -- Napoleon (NumPy style docstrings) --
napoleon_google_docstring = False
napoleon_numpy_docstring = True
napoleon_include_init_with_doc = True
napoleon_use_admonition_for_notes = True
napoleon_use_param = True
napoleon_use_rtype = True
napoleon_preprocess_types = True

# -- Autodocumentation settings --
autodoc_default_options = {
    "member-order": "bysource",
    "undoc-members": True,
    "exclude-members": "__weakref__",
    "show-inheritance": True,
}

autodoc_typehints = "description"
autodoc_typehints_format = "short"

# -- Intersphinx --
intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
    "scipy": ("https://docs.scipy.org/doc/scipy/", None),
}

# -- HTML --
html_theme = "sphinx_rtd_theme"
html_theme_options = {
    "collapse_navigation": False,
    "navigation_depth": 3,
}

copybutton_prompt_text = r">>> |\.\.\. |\$ "
copybutton_prompt_is_regexp = True

# forward references used under TYPE_CHECKING
autodoc_type_aliases = {
    "Kind": "rlmdp_core.types.Kind",
    "OutcomeFunc": "rlmdp_core.types.OutcomeFunc",
    "NumericArray": "rlmdp_core.types.NumericArray",
    "ExpectationStrategy": "rlmdp_core.distributions.strategies.ExpectationStrategy",
    "Sample": "rlmdp_core.distributions.sampling.Sample",
    "Distribution": "rlmdp_core.distributions.distribution.Distribution",
    "FiniteDistribution": "rlmdp_core.distributions.finite.FiniteDistribution",
    "State": "rlmdp_core.markov.state.State",
    "MarkovProcess": "rlmdp_core.markov.process.MarkovProcess",
}

nitpicky = False
