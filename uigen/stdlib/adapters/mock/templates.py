"""Canned React sources used by the scripted mock model.

Each :class:`ComponentTemplate` bundles the component file, the edit the
model applies to it in its enhancement step, and the App entry file that
renders it. The edit's ``old_str`` always occurs in ``code``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ComponentKind(StrEnum):
    """Component variants the mock model knows how to build."""

    FORM = "form"
    CARD = "card"
    COUNTER = "counter"


@dataclass(frozen=True, slots=True)
class ComponentTemplate:
    kind: ComponentKind
    name: str
    code: str
    old_str: str
    new_str: str

    @property
    def path(self) -> str:
        return f"/components/{self.name}.jsx"

    @property
    def app_code(self) -> str:
        if self.kind is ComponentKind.CARD:
            return _CARD_APP
        return _APP.format(name=self.name)


_CONTACT_FORM = """\
import React, { useState } from 'react';

const ContactForm = () => {
  const [formData, setFormData] = useState({
    name: '',
    email: '',
    message: ''
  });

  const handleChange = (e) => {
    setFormData({
      ...formData,
      [e.target.name]: e.target.value
    });
  };

  const handleSubmit = (e) => {
    e.preventDefault();
    console.log('Form submitted:', formData);
  };

  return (
    <div className="max-w-md mx-auto p-6 bg-white rounded-lg shadow-md">
      <h2 className="text-2xl font-bold mb-6">Contact Us</h2>
      <form onSubmit={handleSubmit} className="space-y-4">
        <div>
          <label htmlFor="name" className="block text-sm font-medium text-gray-700 mb-1">
            Name
          </label>
          <input
            type="text"
            id="name"
            name="name"
            value={formData.name}
            onChange={handleChange}
            required
            className="w-full px-3 py-2 border border-gray-300 rounded-md focus:outline-none focus:ring-2 focus:ring-blue-500"
          />
        </div>

        <div>
          <label htmlFor="email" className="block text-sm font-medium text-gray-700 mb-1">
            Email
          </label>
          <input
            type="email"
            id="email"
            name="email"
            value={formData.email}
            onChange={handleChange}
            required
            className="w-full px-3 py-2 border border-gray-300 rounded-md focus:outline-none focus:ring-2 focus:ring-blue-500"
          />
        </div>

        <div>
          <label htmlFor="message" className="block text-sm font-medium text-gray-700 mb-1">
            Message
          </label>
          <textarea
            id="message"
            name="message"
            value={formData.message}
            onChange={handleChange}
            required
            rows={4}
            className="w-full px-3 py-2 border border-gray-300 rounded-md focus:outline-none focus:ring-2 focus:ring-blue-500"
          />
        </div>

        <button
          type="submit"
          className="w-full bg-blue-500 text-white py-2 px-4 rounded-md hover:bg-blue-600 transition-colors"
        >
          Send Message
        </button>
      </form>
    </div>
  );
};

export default ContactForm;"""

_CARD = """\
import React from 'react';

const Card = ({
  title = "Welcome to Our Service",
  description = "Discover amazing features and capabilities that will transform your experience.",
  imageUrl,
  actions
}) => {
  return (
    <div className="bg-white rounded-lg shadow-md overflow-hidden">
      {imageUrl && (
        <img
          src={imageUrl}
          alt={title}
          className="w-full h-48 object-cover"
        />
      )}
      <div className="p-6">
        <h3 className="text-xl font-semibold mb-2">{title}</h3>
        <p className="text-gray-600 mb-4">{description}</p>
        {actions && (
          <div className="mt-4">
            {actions}
          </div>
        )}
      </div>
    </div>
  );
};

export default Card;"""

_COUNTER = """\
import { useState } from 'react';

const Counter = () => {
  const [count, setCount] = useState(0);

  const increment = () => setCount(count + 1);
  const decrement = () => setCount(count - 1);
  const reset = () => setCount(0);

  return (
    <div className="flex flex-col items-center p-6 bg-white rounded-lg shadow-md">
      <h2 className="text-2xl font-bold mb-4">Counter</h2>
      <div className="text-4xl font-bold mb-6">{count}</div>
      <div className="flex gap-4">
        <button
          onClick={decrement}
          className="px-4 py-2 bg-red-500 text-white rounded hover:bg-red-600 transition-colors"
        >
          Decrease
        </button>
        <button
          onClick={reset}
          className="px-4 py-2 bg-gray-500 text-white rounded hover:bg-gray-600 transition-colors"
        >
          Reset
        </button>
        <button
          onClick={increment}
          className="px-4 py-2 bg-green-500 text-white rounded hover:bg-green-600 transition-colors"
        >
          Increase
        </button>
      </div>
    </div>
  );
};

export default Counter;"""

_APP = """\
import {name} from '@/components/{name}';

export default function App() {{
  return (
    <div className="min-h-screen bg-gray-100 flex items-center justify-center p-8">
      <div className="w-full max-w-md">
        <{name} />
      </div>
    </div>
  );
}}"""

_CARD_APP = """\
import Card from '@/components/Card';

export default function App() {
  return (
    <div className="min-h-screen bg-gray-100 flex items-center justify-center p-8">
      <div className="w-full max-w-md">
        <Card
          title="Amazing Product"
          description="This is a fantastic product that will change your life. Experience the difference today!"
          actions={
            <button className="bg-blue-500 text-white px-4 py-2 rounded hover:bg-blue-600 transition-colors">
              Learn More
            </button>
          }
        />
      </div>
    </div>
  );
}"""


TEMPLATES: dict[ComponentKind, ComponentTemplate] = {
    ComponentKind.FORM: ComponentTemplate(
        kind=ComponentKind.FORM,
        name="ContactForm",
        code=_CONTACT_FORM,
        old_str="    console.log('Form submitted:', formData);",
        new_str=(
            "    console.log('Form submitted:', formData);\n"
            "    alert('Thank you! We\\'ll get back to you soon.');"
        ),
    ),
    ComponentKind.CARD: ComponentTemplate(
        kind=ComponentKind.CARD,
        name="Card",
        code=_CARD,
        old_str='      <div className="p-6">',
        new_str='      <div className="p-6 hover:bg-gray-50 transition-colors">',
    ),
    ComponentKind.COUNTER: ComponentTemplate(
        kind=ComponentKind.COUNTER,
        name="Counter",
        code=_COUNTER,
        old_str="  const increment = () => setCount(count + 1);",
        new_str="  const increment = () => setCount(prev => prev + 1);",
    ),
}


def detect_component(prompt: str) -> ComponentTemplate:
    """Pick the template whose keyword occurs in *prompt* (case-insensitive).

    ``form`` is checked before ``card``; anything else gets the counter.
    """
    lowered = prompt.lower()
    if "form" in lowered:
        return TEMPLATES[ComponentKind.FORM]
    if "card" in lowered:
        return TEMPLATES[ComponentKind.CARD]
    return TEMPLATES[ComponentKind.COUNTER]


__all__ = ["TEMPLATES", "ComponentKind", "ComponentTemplate", "detect_component"]
