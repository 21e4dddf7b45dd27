"""
Project catalog contents.

Slugs are permanent URLs. Do not rename a published slug.
"""

IMAGE_BASE = "/static/images/projects"


def _gallery(slug: str, count: int) -> list[str]:
    return [f"{IMAGE_BASE}/{slug}/gallery-{n}.jpg" for n in range(1, count + 1)]


PROJECTS = [
    {
        "id": 1,
        "slug": "harbour-view-tower",
        "title": "Harbour View Tower",
        "description": (
            "A 32-storey commercial tower wrapped in a unitised curtain wall with "
            "high-performance double glazing.\n\n"
            "Panels were prefabricated off-site and installed floor by floor, "
            "keeping the façade two levels behind the structural frame."
        ),
        "category": "Commercial",
        "status": "Completed",
        "location": "Dubai Marina, UAE",
        "year": "2023",
        "image": f"{IMAGE_BASE}/harbour-view-tower/hero.jpg",
        "gallery": _gallery("harbour-view-tower", 8),
        "video_url": f"{IMAGE_BASE}/harbour-view-tower/walkthrough.mp4",
        "stats": {"area": "42,000 m²", "duration": "18 months"},
        "featured": True,
    },
    {
        "id": 2,
        "slug": "palm-residences",
        "title": "Palm Residences",
        "description": (
            "Floor-to-ceiling sliding systems and frameless glass balustrades "
            "for a beachfront residential block of 120 apartments."
        ),
        "category": "Residential",
        "status": "Completed",
        "location": "Palm Jumeirah, UAE",
        "year": "2022",
        "image": f"{IMAGE_BASE}/palm-residences/hero.jpg",
        "gallery": _gallery("palm-residences", 4),
        "stats": {"area": "18,500 m²", "duration": "11 months"},
        "featured": True,
    },
    {
        "id": 3,
        "slug": "city-walk-retail-arcade",
        "title": "City Walk Retail Arcade",
        "description": (
            "Structural glass shopfronts and a tensile skylight over the central "
            "arcade, with fire-rated glazing to the anchor stores."
        ),
        "category": "Retail",
        "status": "Completed",
        "location": "Dubai, UAE",
        "year": "2021",
        "image": f"{IMAGE_BASE}/city-walk-retail-arcade/hero.jpg",
        "gallery": _gallery("city-walk-retail-arcade", 6),
        "stats": {"area": "9,800 m²", "duration": "7 months"},
        "featured": True,
    },
    {
        "id": 4,
        "slug": "al-noor-hotel",
        "title": "Al Noor Hotel",
        "description": (
            "Stick-built curtain wall with bronze-anodised fins shading the "
            "guest rooms of a 240-key hotel."
        ),
        "category": "Hospitality",
        "status": "In Progress",
        "location": "Abu Dhabi, UAE",
        "year": "2025",
        "image": f"{IMAGE_BASE}/al-noor-hotel/hero.jpg",
        "gallery": _gallery("al-noor-hotel", 3),
        "stats": {"area": "26,000 m²", "duration": "20 months"},
        "featured": True,
    },
    {
        "id": 5,
        "slug": "creek-side-villas",
        "title": "Creek Side Villas",
        "description": (
            "Thermally broken aluminium windows and doors for a gated community "
            "of 36 villas."
        ),
        "category": "Residential",
        "status": "Completed",
        "location": "Dubai Creek Harbour, UAE",
        "year": "2020",
        "image": f"{IMAGE_BASE}/creek-side-villas/hero.jpg",
        "gallery": _gallery("creek-side-villas", 1),
        "stats": {"area": "7,200 m²", "duration": "9 months"},
        "featured": False,
    },
    {
        "id": 6,
        "slug": "mirdif-medical-centre",
        "title": "Mirdif Medical Centre",
        "description": (
            "Ventilated aluminium composite cladding and acoustic glazing for an "
            "outpatient clinic facing a major highway."
        ),
        "category": "Healthcare",
        "status": "Completed",
        "location": "Mirdif, Dubai, UAE",
        "year": "2022",
        "image": f"{IMAGE_BASE}/mirdif-medical-centre/hero.jpg",
        "gallery": _gallery("mirdif-medical-centre", 2),
        "stats": {"area": "6,400 m²", "duration": "8 months"},
        "featured": True,
    },
    {
        "id": 7,
        "slug": "business-bay-offices",
        "title": "Business Bay Offices",
        "description": (
            "Retrofit of a 1990s office block: existing cladding replaced with a "
            "low-e unitised system while the building stayed occupied."
        ),
        "category": "Commercial",
        "status": "Completed",
        "location": "Business Bay, Dubai, UAE",
        "year": "2019",
        "image": f"{IMAGE_BASE}/business-bay-offices/hero.jpg",
        "gallery": [],
        "stats": {"area": "15,000 m²", "duration": "14 months"},
        "featured": False,
    },
    {
        "id": 8,
        "slug": "marina-mall-extension",
        "title": "Marina Mall Extension",
        "description": (
            "Double-height entrance canopy and spider-fixed glass walls for the "
            "mall's new north wing."
        ),
        "category": "Retail",
        "status": "Completed",
        "location": "Dubai Marina, UAE",
        "year": "2021",
        "image": f"{IMAGE_BASE}/marina-mall-extension/hero.jpg",
        "gallery": _gallery("marina-mall-extension", 5),
        "stats": {"area": "11,300 m²", "duration": "10 months"},
        "featured": False,
    },
    {
        "id": 9,
        "slug": "knowledge-park-campus",
        "title": "Knowledge Park Campus",
        "description": (
            "Curtain wall, louvres and skylights across three teaching blocks "
            "and a library for a private university."
        ),
        "category": "Education",
        "status": "Completed",
        "location": "Dubai Knowledge Park, UAE",
        "year": "2020",
        "image": f"{IMAGE_BASE}/knowledge-park-campus/hero.jpg",
        "gallery": _gallery("knowledge-park-campus", 7),
        "stats": {"area": "21,000 m²", "duration": "16 months"},
        "featured": False,
    },
    {
        "id": 10,
        "slug": "jumeirah-beach-apartments",
        "title": "Jumeirah Beach Apartments",
        "description": (
            "Hurricane-rated sliding doors and glass balustrades for a "
            "seafront residential tower."
        ),
        "category": "Residential",
        "status": "Completed",
        "location": "JBR, Dubai, UAE",
        "year": "2018",
        "image": f"{IMAGE_BASE}/jumeirah-beach-apartments/hero.jpg",
        "gallery": _gallery("jumeirah-beach-apartments", 3),
        "stats": {"area": "24,000 m²", "duration": "13 months"},
        "featured": False,
    },
    {
        "id": 11,
        "slug": "desert-rose-resort",
        "title": "Desert Rose Resort",
        "description": (
            "Bespoke timber-effect aluminium screens and glazed pavilions for a "
            "desert resort and spa."
        ),
        "category": "Hospitality",
        "status": "Completed",
        "location": "Al Ain, UAE",
        "year": "2019",
        "image": f"{IMAGE_BASE}/desert-rose-resort/hero.jpg",
        "gallery": _gallery("desert-rose-resort", 9),
        "stats": {"area": "12,700 m²", "duration": "12 months"},
        "featured": False,
    },
    {
        "id": 12,
        "slug": "sheikh-zayed-road-showroom",
        "title": "Sheikh Zayed Road Showroom",
        "description": (
            "Full-height structural silicone glazing with minimal mullions for "
            "a luxury car showroom."
        ),
        "category": "Retail",
        "status": "Completed",
        "location": "Sheikh Zayed Road, Dubai, UAE",
        "year": "2023",
        "image": f"{IMAGE_BASE}/sheikh-zayed-road-showroom/hero.jpg",
        "gallery": _gallery("sheikh-zayed-road-showroom", 4),
        "stats": {"area": "3,900 m²", "duration": "5 months"},
        "featured": False,
    },
    {
        "id": 13,
        "slug": "al-barsha-townhouses",
        "title": "Al Barsha Townhouses",
        "description": (
            "Windows, doors and privacy screens for 54 townhouses, delivered in "
            "three phases."
        ),
        "category": "Residential",
        "status": "In Progress",
        "location": "Al Barsha, Dubai, UAE",
        "year": "2025",
        "image": "",
        "gallery": [],
        "stats": {"area": "10,100 m²", "duration": "15 months"},
        "featured": False,
    },
    {
        "id": 14,
        "slug": "healthcare-city-wellness-hub",
        "title": "Healthcare City Wellness Hub",
        "description": (
            "Unitised curtain wall with integrated solar shading for a "
            "six-storey wellness and diagnostics centre."
        ),
        "category": "Healthcare",
        "status": "Completed",
        "location": "Dubai Healthcare City, UAE",
        "year": "2024",
        "image": f"{IMAGE_BASE}/healthcare-city-wellness-hub/hero.jpg",
        "gallery": _gallery("healthcare-city-wellness-hub", 6),
        "stats": {"area": "13,400 m²", "duration": "12 months"},
        "featured": False,
    },
    {
        "id": 15,
        "slug": "downtown-boutique-hotel",
        "title": "Downtown Boutique Hotel",
        "description": (
            "Patterned frit glazing and perforated metal panels for a "
            "90-room boutique hotel near the Opera District."
        ),
        "category": "Hospitality",
        "status": "Completed",
        "location": "Downtown Dubai, UAE",
        "year": "2022",
        "image": f"{IMAGE_BASE}/downtown-boutique-hotel/hero.jpg",
        "gallery": _gallery("downtown-boutique-hotel", 2),
        "stats": {"area": "8,600 m²", "duration": "9 months"},
        "featured": False,
    },
    {
        "id": 16,
        "slug": "silicon-oasis-school",
        "title": "Silicon Oasis School",
        "description": (
            "Impact-resistant glazing and sun-shading canopies for a K-12 school "
            "campus with a glazed sports hall."
        ),
        "category": "Education",
        "status": "Completed",
        "location": "Dubai Silicon Oasis, UAE",
        "year": "2021",
        "image": f"{IMAGE_BASE}/silicon-oasis-school/hero.jpg",
        "gallery": _gallery("silicon-oasis-school", 5),
        "stats": {"area": "17,800 m²", "duration": "11 months"},
        "featured": False,
    },
]
