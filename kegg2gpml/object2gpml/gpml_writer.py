from kegg2gpml.data_structure.wiki_data_structure import DataNode, Pathway

GPML_NAMESPACE = "http://pathvisio.org/GPML/2021"


class GPMLWriter:
    def __init__(self):
        pass

    def escape_xml(self, text):
        """
        Escape special XML characters in text

        Args:
            text: String to escape

        Returns:
            str: Escaped string safe for XML attributes
        """
        if text is None:
            return ""
        if not isinstance(text, str):
            text = str(text)

        text = text.replace('&', '&amp;')
        text = text.replace('<', '&lt;')
        text = text.replace('>', '&gt;')
        text = text.replace('"', '&quot;')
        text = text.replace("'", '&apos;')

        return text

    def write_xref(self, xref, indent) -> str:
        return f'{indent}<Xref identifier="{self.escape_xml(xref.identifier)}" dataSource="{self.escape_xml(xref.dataSource)}" />\n'

    def write_comments(self, comments, indent) -> str:
        gpml_output = ''
        for comment in comments:
            source = getattr(comment, 'source', '')
            text = getattr(comment, 'value', '')

            if source:
                gpml_output += f'{indent}<Comment source="{self.escape_xml(source)}">{self.escape_xml(text)}</Comment>\n'
            else:
                gpml_output += f'{indent}<Comment>{self.escape_xml(text)}</Comment>\n'
        return gpml_output

    def write_properties(self, properties, indent) -> str:
        gpml_output = ''
        for prop in properties:
            gpml_output += f'{indent}<Property key="{self.escape_xml(prop.key)}" value="{self.escape_xml(prop.value)}" />\n'
        return gpml_output

    def write_datanode(self, datanode: DataNode) -> str:
        """
        Converts a DataNode object into a GPML DataNode XML string.

        Args:
            datanode: The DataNode object to convert.

        Returns:
            str: The GPML XML string for the DataNode.
        """
        element_id = self.escape_xml(datanode.elementId)
        text_label = self.escape_xml(datanode.textLabel)
        node_type = datanode.type.value

        gpml_output = f'    <DataNode elementId="{element_id}" textLabel="{text_label}" type="{node_type}">\n'

        if datanode.xref:
            gpml_output += self.write_xref(datanode.xref, '      ')

        graphics = datanode.graphics
        gpml_output += '      <Graphics'

        # Required position and dimension attributes
        gpml_output += f' centerX="{graphics.centerX}"'
        gpml_output += f' centerY="{graphics.centerY}"'
        gpml_output += f' width="{graphics.width}"'
        gpml_output += f' height="{graphics.height}"'

        text_color = graphics.textColor if graphics.textColor is not None else "000000"
        gpml_output += f' textColor="{text_color}"'

        font_name = graphics.fontName if graphics.fontName is not None else "Arial"
        gpml_output += f' fontName="{self.escape_xml(font_name)}"'
        gpml_output += ' fontWeight="Bold"' if graphics.fontWeight else ' fontWeight="Normal"'
        gpml_output += ' fontStyle="Italic"' if graphics.fontStyle else ' fontStyle="Normal"'

        font_size = int(graphics.fontSize) if graphics.fontSize is not None else 10
        gpml_output += f' fontSize="{font_size}"'

        h_align = graphics.hAlign.value if graphics.hAlign is not None else "Center"
        v_align = graphics.vAlign.value if graphics.vAlign is not None else "Middle"
        gpml_output += f' hAlign="{h_align}" vAlign="{v_align}"'

        # Shape style attributes
        border_color = graphics.borderColor if graphics.borderColor is not None else "000000"
        gpml_output += f' borderColor="{border_color}"'

        border_style = graphics.borderStyle.value if graphics.borderStyle is not None else "Solid"
        gpml_output += f' borderStyle="{border_style}"'

        border_width = graphics.borderWidth if graphics.borderWidth is not None else 1.0
        gpml_output += f' borderWidth="{border_width}"'

        fill_color = graphics.fillColor if graphics.fillColor is not None else "FFFFFF"
        gpml_output += f' fillColor="{fill_color}"'

        shape_type = graphics.shapeType.value if graphics.shapeType is not None else "Rectangle"
        gpml_output += f' shapeType="{shape_type}"'

        if graphics.zOrder is not None:
            gpml_output += f' zOrder="{int(graphics.zOrder)}"'

        gpml_output += ' />\n'

        gpml_output += self.write_comments(datanode.comments, '      ')
        gpml_output += self.write_properties(datanode.properties, '      ')

        gpml_output += '    </DataNode>\n'
        return gpml_output

    def write_pathway(self, pathway: Pathway) -> str:
        """
        Write a complete pathway to GPML format

        Args:
            pathway: Pathway object containing all elements

        Returns:
            str: Complete GPML XML string
        """
        gpml_output = '<?xml version="1.0" encoding="UTF-8"?>\n'

        gpml_output += f'<Pathway xmlns="{GPML_NAMESPACE}"'
        gpml_output += f' title="{self.escape_xml(pathway.title)}"'

        if pathway.organism:
            gpml_output += f' organism="{self.escape_xml(pathway.organism)}"'
        if pathway.source:
            gpml_output += f' source="{self.escape_xml(pathway.source)}"'
        if pathway.version:
            gpml_output += f' version="{self.escape_xml(pathway.version)}"'
        if pathway.license:
            gpml_output += f' license="{self.escape_xml(pathway.license)}"'

        gpml_output += '>\n'

        if pathway.xref:
            gpml_output += self.write_xref(pathway.xref, '  ')

        if pathway.description:
            gpml_output += f'  <Description>{self.escape_xml(pathway.description)}</Description>\n'

        if pathway.authors:
            gpml_output += '  <Authors>\n'
            for author in pathway.authors:
                gpml_output += f'    <Author name="{self.escape_xml(author.name)}"'

                if author.username:
                    gpml_output += f' username="{self.escape_xml(author.username)}"'
                if author.order is not None:
                    gpml_output += f' order="{author.order}"'

                if author.xref:
                    gpml_output += '>\n'
                    gpml_output += self.write_xref(author.xref, '      ')
                    gpml_output += '    </Author>\n'
                else:
                    gpml_output += ' />\n'

            gpml_output += '  </Authors>\n'

        gpml_output += self.write_comments(pathway.comments, '  ')
        gpml_output += self.write_properties(pathway.properties, '  ')

        # Graphics - board size
        gpml_output += f'  <Graphics boardWidth="{pathway.graphics.boardWidth}" boardHeight="{pathway.graphics.boardHeight}" />\n'

        if pathway.dataNodes:
            gpml_output += '  <DataNodes>\n'
            for datanode in pathway.dataNodes:
                gpml_output += self.write_datanode(datanode)
            gpml_output += '  </DataNodes>\n'

        gpml_output += '</Pathway>\n'

        return gpml_output
