"""Use-case / operations layer.

Headless helpers invoked by the dispatcher: marked path collection, shell
command expansion/execution and outcome classification.
"""
