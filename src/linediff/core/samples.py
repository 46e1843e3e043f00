"""Bundled sample texts and the supported view modes"""

SAMPLE_ORIGINAL = """\
function greet(name) {
  console.log("Hello, " + name);
  return true;
}

const message = "Welcome";
greet(message);"""

SAMPLE_MODIFIED = """\
function greet(name, greeting = "Hello") {
  console.log(greeting + ", " + name + "!");
  return true;
}

const message = "Welcome";
const customGreeting = "Hi";
greet(message, customGreeting);"""

VIEW_MODES = ("unified", "split")
