"""Components of the outline -> document -> HTML -> video pipeline.

Each component implements one of the protocols of \
[`protocols`][slidefactory.components.protocols] and is instantiated by the \
[`SettingsFactory`][slidefactory.components.factory.SettingsFactory].
"""
