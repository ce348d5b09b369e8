# %% [markdown]
# # Use aliasmap

# %%
from aliasmap import AliasMap, ComponentRegistry, NamedItem

# %% [markdown]
# ## Store named values
#
# - Each value is stored under its primary name and every alias.
# - `len()` counts primary names only.

# %%
colors = AliasMap()
colors.set(NamedItem(name="red", aliases=["r", "crimson"], rgb=(255, 0, 0)))
colors.set({"name": "blue", "aliases": ["b"]}, (0, 0, 255))

print(len(colors))
print(colors.get("crimson").rgb)
print(colors.get("b"))

# %%
# Iteration follows insertion order of primary names.
for name, value in colors:
    print(name, value)

colors.for_each(lambda value, index, _: print(index, value))

# %% [markdown]
# ## Update and delete
#
# Re-setting a name keeps its position and replaces its aliases. Delete only
# needs the primary name; the map remembers which aliases belong to it.

# %%
colors.set(NamedItem(name="red", aliases=["scarlet"]))
print(colors.has("crimson"), colors.has("scarlet"))

colors.delete("red")
print(list(colors.keys()))

# %% [markdown]
# ## Register components

# %%
gates = ComponentRegistry("gates")


@gates.register("blur", aliases=["laplacian"])
class BlurGate:
    def __init__(self, threshold=100.0):
        self.threshold = threshold


print(gates.create("laplacian", threshold=50.0).threshold)
print(gates)
