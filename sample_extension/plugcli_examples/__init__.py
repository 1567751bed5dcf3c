"""Sample commands demonstrating plugcli command development.

Add "plugcli_examples" to the namespaces of an application to use them.
"""
