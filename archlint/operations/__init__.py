"""Report operations: check, graph, mapping, schema, self-inspect and version."""