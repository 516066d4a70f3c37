
from setuptools import setup

setup(
    name =             "cuitab",
    version =          "0.0.1",
    author =           "Christoph Landgraf",
    author_email =     "christoph.landgraf@googlemail.com",
    description =      "Tabbed widget container for text UIs",
    license =          "BSD",
    url =              "https://github.com/clandgraf/cui",
    packages =         ['cuitab'],
    extras_require =   {'test': ['pytest']},
)
