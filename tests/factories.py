from apps.projects.models import ProjectRecord


def make_record(id: int, category: str, featured: bool = False, **fields) -> ProjectRecord:
    data = {
        "id": id,
        "slug": f"project-{id}",
        "title": f"Project {id}",
        "category": category,
        "stats": {"area": "1,000 m²", "duration": "6 months"},
        "featured": featured,
    }
    data.update(fields)
    return ProjectRecord(**data)
