"""Prompt templates for AI website generation."""

from core.models import GenerationRequest

SYSTEM_PROMPT = (
    "You are an expert web developer and designer who creates beautiful, "
    "professional websites. Always respond with valid JSON."
)

GENERATION_PROMPT_TEMPLATE = """
You are an expert web developer and designer. Generate a complete, professional website based on the following requirements:

Website Name: {name}
Description: {description}
Include Navigation: {include_navigation}
Include Footer: {include_footer}
Include Contact Form: {include_contact_form}
Responsive Design: {is_responsive}
Primary Color: {primary}
Secondary Color: {secondary}
{images_line}

Generate a complete website with:
1. Semantic HTML structure
2. Modern CSS styling with responsive design using the specified color scheme
3. Navigation menu with relevant sections
4. Footer with contact information and links
5. Hero section and content sections
6. Use the provided primary color ({primary}) and secondary color ({secondary}) throughout the design
7. {contact_form_line}
{hero_image_line}
{color_section}
{image_section}
Return the response as JSON with this exact structure:
{{
  "html": "complete HTML document",
  "css": "complete CSS styles with the specified color scheme",
  "navigationItems": ["array", "of", "navigation", "menu", "items"],
  "footerContent": "footer content description"
}}

Make the design modern, professional, and visually appealing. Use contemporary web design patterns, proper spacing, and good typography. Ensure the content is relevant to the website description provided.
"""

COLOR_SECTION = """
Color Usage Guidelines:
- Use {primary} for primary elements like buttons, navigation, headings
- Use {secondary} for accents, hover states, and secondary elements
- Create gradients between these colors where appropriate
- Ensure good contrast for readability
"""

IMAGE_SECTION = """
Image Integration:
- First image: Use as hero background or prominent feature
- Additional images: Create an image gallery or integrate throughout content
- All images should use the provided URLs: {urls}
- Add proper alt tags and responsive sizing
"""


def _flag(value: bool) -> str:
    return "true" if value else "false"


def build_generation_prompt(request: GenerationRequest) -> str:
    """Render the user prompt embedding every field of the request."""
    urls = ", ".join(request.image_urls)
    has_images = bool(request.image_urls)

    return GENERATION_PROMPT_TEMPLATE.format(
        name=request.name,
        description=request.description,
        include_navigation=_flag(request.include_navigation),
        include_footer=_flag(request.include_footer),
        include_contact_form=_flag(request.include_contact_form),
        is_responsive=_flag(request.is_responsive),
        primary=request.primary_color,
        secondary=request.secondary_color,
        images_line=f"Images to Include: {urls}" if has_images else "No images provided",
        contact_form_line=(
            "A contact form" if request.include_contact_form else "No contact form needed"
        ),
        hero_image_line=(
            "8. Include the provided images in an attractive layout - "
            "use the first image as a hero background if appropriate"
            if has_images else ""
        ),
        color_section=COLOR_SECTION.format(
            primary=request.primary_color, secondary=request.secondary_color
        ),
        image_section=IMAGE_SECTION.format(urls=urls) if has_images else "",
    )
