"""Prompt templates for Blueprint export workflows.

Prompts are static text; generating them needs no editor connection.
"""

DATA_TYPE_KINDS = ("struct", "enum")


def convert_blueprint_prompt(blueprint_path: str, notes: str = "") -> str:
    """Build the prompt for converting a Blueprint to an AngelScript class.

    Args:
        blueprint_path: The path to the Blueprint asset (e.g., '/Game/Core/Inventory/BP_InventoryVisual')
        notes: Optional extra instructions from the user

    Returns:
        Prompt text, sent to the client as a single user message
    """
    text = f"""Convert the Blueprint at path '{blueprint_path}' into an equivalent AngelScript class.

Steps:
1. Call ping_editor to confirm Unreal Editor is running with the BlueprintExporter plugin.
2. Call export_blueprint with path '{blueprint_path}' to get the full graph data (variables, components, functions, events).
3. For every UserDefinedStruct or UserDefinedEnum the Blueprint references, call export_struct or export_enum so the generated types match exactly.
4. Write the AngelScript class:
   - Keep the parent class, variable names, types and default values.
   - Recreate components in the default-component section.
   - Translate each function and event graph by following its execution pins in order.
5. List any nodes you could not translate and why."""
    if notes.strip():
        text += f"\n\nAdditional notes: {notes.strip()}"
    return text


def inspect_data_type_prompt(asset_path: str, kind: str = "struct") -> str:
    """Build the prompt for summarising a UserDefinedStruct or UserDefinedEnum.

    Args:
        asset_path: The path to the struct or enum asset
        kind: 'struct' or 'enum'

    Returns:
        Prompt text, sent to the client as a single user message

    Raises:
        ValueError: If kind is not 'struct' or 'enum'
    """
    kind = kind.strip().lower()
    if kind not in DATA_TYPE_KINDS:
        raise ValueError(f"Invalid kind: {kind}. Must be one of: {', '.join(DATA_TYPE_KINDS)}")

    if kind == "struct":
        text = f"""Call export_struct with path '{asset_path}' and summarise the struct.

Please provide:
1. **Fields**: name, type and default value of every field
2. **Nested Types**: any structs or enums used by the fields
3. **Script Declaration**: an equivalent AngelScript USTRUCT declaration"""
    else:
        text = f"""Call export_enum with path '{asset_path}' and summarise the enum.

Please provide:
1. **Values**: entry name, display name and numeric value of every entry
2. **Script Declaration**: an equivalent AngelScript UENUM declaration"""
    return text
