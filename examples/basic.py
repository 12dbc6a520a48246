"""
Basic hookshot Example

Demonstrates filters, actions, the "all" hook, and shortcodes.
"""

import logging
import sys
sys.path.insert(0, '..')

import hookshot

# Filters transform a value; lower priority runs first
@hookshot.on_filter("title", priority=10)
def strip_title(value):
    return value.strip()

@hookshot.on_filter("title", priority=20)
def shout_title(value):
    return value.upper()

# Actions are fired for their side effects
@hookshot.on_action("saved")
def announce(record):
    print(f"   saved: {record}")

# Runs before every fired tag
def trace(tag, *args):
    print(f"   [all] {tag} {args}")

# Shortcodes
@hookshot.shortcode("link")
def link(attrs, content, tag):
    values = hookshot.shortcode_attrs({"href": "#", "class": "link"}, attrs, tag)
    return f'<a href="{values["href"]}" class="{values["class"]}">{content or values["href"]}</a>'

# Execute examples
def main():
    logging.basicConfig(level=logging.DEBUG)
    print("=== hookshot Basic Example ===\n")

    print("1. Filter chain:")
    print(f"   Result: {hookshot.apply_filters('title', '  hello world ')!r}\n")

    print("2. Action:")
    hookshot.do_action("saved", {"id": 7})
    print(f"   'saved' fired {hookshot.did_action('saved')} time(s)\n")

    print("3. The 'all' hook:")
    hookshot.add_action("all", trace)
    hookshot.do_action("saved", {"id": 8})
    hookshot.remove_action("all", trace)
    print()

    print("4. Shortcodes:")
    text = 'See [link href="https://example.com"]the docs[/link] or [[link]] for details.'
    print(f"   {hookshot.do_shortcode(text)}")
    print(f"   {hookshot.strip_shortcodes(text)}")

if __name__ == "__main__":
    main()
