"""
Album feature: record schema, raw-SQL repository, service and HTTP router.
"""
