"""Built-in commands.

Every module in this package exposing an `Extension` class derived from
`plugcli.commands.interface.Command` is available as a command named after
the module.
"""
