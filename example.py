"""Example usage of the docquery library."""

from docquery import QueryEngine

# Describe the shape to match; "@label" marks an output column
query = """
kind "Deployment"
metadata {
    name "@name"
}
spec {
    template {
        spec {
            containers {
                * {
                    image "@image"
                }
            }
        }
    }
}
"""

document = """
kind: Deployment
metadata:
  name: web
spec:
  template:
    spec:
      containers:
      - image: registry.example/web:1.4.2
      - image: registry.example/sidecar:0.9.0
        name: sidecar
"""

engine = QueryEngine()

# Compile once, run against any number of documents
compiled = engine.compile(query)
print(f"Compiled {len(compiled.ir.vertices)} vertices, {len(compiled.ir.edges)} edges")
for label, binding in compiled.ir.outputs.items():
    print(f"  {label}: property {binding.field_name!r} of vertex {binding.vid}")

for row in engine.run(query, document):
    print(f"{row['name']}: {row['image']}")
