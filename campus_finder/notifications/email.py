from markupsafe import escape


def compose_found_match_email(found):
    """
    Build the (subject, html) pair sent to owners of lost items.

    `found` needs `category` and `title`; `description` and `location`
    are optional and left out of the body when empty.
    """
    category = found.get('category')
    subject = f"New found item in {category} may match your lost item"

    lines = [f"<li><strong>Title:</strong> {escape(found.get('title') or '')}</li>"]
    if found.get('description'):
        lines.append(f"<li><strong>Description:</strong> {escape(found['description'])}</li>")
    if found.get('location'):
        lines.append(f"<li><strong>Location:</strong> {escape(found['location'])}</li>")

    html = (
        '<div style="font-family: Arial, sans-serif; line-height:1.5;">'
        '<h2>Possible match for your lost item</h2>'
        f'<p>Someone just reported a <strong>found</strong> item in the <strong>{escape(category)}</strong> category.</p>'
        f'<ul>{"".join(lines)}</ul>'
        '<p>Visit the app to review details and contact the finder.</p>'
        '</div>'
    )
    return subject, html
