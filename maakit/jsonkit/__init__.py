"""JSON value model with typed access, serialization and declarative field mapping."""