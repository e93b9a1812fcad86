
# _node_parsetab.py
# This file is automatically generated. Do not edit.
# pylint: disable=W,C,R
_tabversion = '3.10'

_lr_method = 'LALR'

_lr_signature = 'documentEQUALS FALSE FLOAT IDENTIFIER INTEGER LBRACE LPAREN NEWLINE NULL RBRACE RPAREN SEMICOLON SLASHDASH STRING TRUEdocument : nodesnodes : seps_optnodes : seps_opt node_list seps_optnode_list : nodenode_list : node_list seps nodeseps : NEWLINE\n                | SEMICOLON\n                | seps NEWLINE\n                | seps SEMICOLONseps_opt : seps\n                    | node : node_bodynode : SLASHDASH node_bodynode_body : node_name entries children_optnode_body : type_annotation node_name entries children_optnode_name : IDENTIFIER\n                     | STRINGtype_annotation : LPAREN IDENTIFIER RPAREN\n                           | LPAREN STRING RPARENentries : entries : entries entryentries : entries SLASHDASH entryentry : valueentry : IDENTIFIER EQUALS value\n                 | STRING EQUALS valuevalue : literalvalue : type_annotation literalliteral : STRING\n                   | IDENTIFIER\n                   | INTEGER\n                   | FLOATliteral : TRUEliteral : FALSEliteral : NULLchildren_opt : children_opt : children_blockchildren_opt : SLASHDASH children_block children_optchildren_block : LBRACE nodes RBRACE'
    
_lr_action_items = {'SLASHDASH':([0,3,4,5,6,11,13,14,16,17,19,21,22,27,30,31,32,33,34,36,37,38,39,40,41,44,45,49,50,51,55,56,57,],[-11,10,-10,-6,-7,-20,-16,-17,-8,-9,10,28,-20,-21,-23,-29,-28,-11,-26,-30,-31,-32,-33,-34,28,-22,53,-27,-28,-29,-24,-25,-38,]),'IDENTIFIER':([0,3,4,5,6,10,11,12,13,14,15,16,17,19,21,22,27,28,30,31,32,33,34,35,36,37,38,39,40,41,42,43,44,46,47,49,50,51,55,56,],[-11,13,-10,-6,-7,13,-20,13,-16,-17,23,-8,-9,13,31,-20,-21,31,-23,-29,-28,-11,-26,51,-30,-31,-32,-33,-34,31,-18,-19,-22,51,51,-27,-28,-29,-24,-25,]),'STRING':([0,3,4,5,6,10,11,12,13,14,15,16,17,19,21,22,27,28,30,31,32,33,34,35,36,37,38,39,40,41,42,43,44,46,47,49,50,51,55,56,],[-11,14,-10,-6,-7,14,-20,14,-16,-17,24,-8,-9,14,32,-20,-21,32,-23,-29,-28,-11,-26,50,-30,-31,-32,-33,-34,32,-18,-19,-22,50,50,-27,-28,-29,-24,-25,]),'LPAREN':([0,3,4,5,6,10,11,13,14,16,17,19,21,22,27,28,30,31,32,33,34,36,37,38,39,40,41,44,46,47,49,50,51,55,56,],[-11,15,-10,-6,-7,15,-20,-16,-17,-8,-9,15,15,-20,-21,15,-23,-29,-28,-11,-26,-30,-31,-32,-33,-34,15,-22,15,15,-27,-28,-29,-24,-25,]),'$end':([0,1,2,3,4,5,6,7,8,9,11,13,14,16,17,18,19,20,21,22,25,26,27,29,30,31,32,34,36,37,38,39,40,41,44,45,49,50,51,52,54,55,56,57,],[-11,0,-1,-2,-10,-6,-7,-11,-4,-12,-20,-16,-17,-8,-9,-3,-10,-13,-35,-20,-5,-14,-21,-36,-23,-29,-28,-26,-30,-31,-32,-33,-34,-35,-22,-35,-27,-28,-29,-15,-37,-24,-25,-38,]),'NEWLINE':([0,4,5,6,7,8,9,11,13,14,16,17,19,20,21,22,25,26,27,29,30,31,32,33,34,36,37,38,39,40,41,44,45,49,50,51,52,54,55,56,57,],[5,16,-6,-7,5,-4,-12,-20,-16,-17,-8,-9,16,-13,-35,-20,-5,-14,-21,-36,-23,-29,-28,5,-26,-30,-31,-32,-33,-34,-35,-22,-35,-27,-28,-29,-15,-37,-24,-25,-38,]),'SEMICOLON':([0,4,5,6,7,8,9,11,13,14,16,17,19,20,21,22,25,26,27,29,30,31,32,33,34,36,37,38,39,40,41,44,45,49,50,51,52,54,55,56,57,],[6,17,-6,-7,6,-4,-12,-20,-16,-17,-8,-9,17,-13,-35,-20,-5,-14,-21,-36,-23,-29,-28,6,-26,-30,-31,-32,-33,-34,-35,-22,-35,-27,-28,-29,-15,-37,-24,-25,-38,]),'RBRACE':([3,4,5,6,7,8,9,11,13,14,16,17,18,19,20,21,22,25,26,27,29,30,31,32,33,34,36,37,38,39,40,41,44,45,48,49,50,51,52,54,55,56,57,],[-2,-10,-6,-7,-11,-4,-12,-20,-16,-17,-8,-9,-3,-10,-13,-35,-20,-5,-14,-21,-36,-23,-29,-28,-11,-26,-30,-31,-32,-33,-34,-35,-22,-35,57,-27,-28,-29,-15,-37,-24,-25,-38,]),'LBRACE':([11,13,14,21,22,27,28,30,31,32,34,36,37,38,39,40,41,44,45,49,50,51,53,55,56,57,],[-20,-16,-17,33,-20,-21,33,-23,-29,-28,-26,-30,-31,-32,-33,-34,33,-22,33,-27,-28,-29,33,-24,-25,-38,]),'INTEGER':([11,13,14,21,22,27,28,30,31,32,34,35,36,37,38,39,40,41,42,43,44,46,47,49,50,51,55,56,],[-20,-16,-17,36,-20,-21,36,-23,-29,-28,-26,36,-30,-31,-32,-33,-34,36,-18,-19,-22,36,36,-27,-28,-29,-24,-25,]),'FLOAT':([11,13,14,21,22,27,28,30,31,32,34,35,36,37,38,39,40,41,42,43,44,46,47,49,50,51,55,56,],[-20,-16,-17,37,-20,-21,37,-23,-29,-28,-26,37,-30,-31,-32,-33,-34,37,-18,-19,-22,37,37,-27,-28,-29,-24,-25,]),'TRUE':([11,13,14,21,22,27,28,30,31,32,34,35,36,37,38,39,40,41,42,43,44,46,47,49,50,51,55,56,],[-20,-16,-17,38,-20,-21,38,-23,-29,-28,-26,38,-30,-31,-32,-33,-34,38,-18,-19,-22,38,38,-27,-28,-29,-24,-25,]),'FALSE':([11,13,14,21,22,27,28,30,31,32,34,35,36,37,38,39,40,41,42,43,44,46,47,49,50,51,55,56,],[-20,-16,-17,39,-20,-21,39,-23,-29,-28,-26,39,-30,-31,-32,-33,-34,39,-18,-19,-22,39,39,-27,-28,-29,-24,-25,]),'NULL':([11,13,14,21,22,27,28,30,31,32,34,35,36,37,38,39,40,41,42,43,44,46,47,49,50,51,55,56,],[-20,-16,-17,40,-20,-21,40,-23,-29,-28,-26,40,-30,-31,-32,-33,-34,40,-18,-19,-22,40,40,-27,-28,-29,-24,-25,]),'RPAREN':([23,24,],[42,43,]),'EQUALS':([31,32,],[46,47,]),}

_lr_action = {}
for _k, _v in _lr_action_items.items():
   for _x,_y in zip(_v[0],_v[1]):
      if not _x in _lr_action:  _lr_action[_x] = {}
      _lr_action[_x][_k] = _y
del _lr_action_items

_lr_goto_items = {'document':([0,],[1,]),'nodes':([0,33,],[2,48,]),'seps_opt':([0,7,33,],[3,18,3,]),'seps':([0,7,33,],[4,19,4,]),'node_list':([3,],[7,]),'node':([3,19,],[8,25,]),'node_body':([3,10,19,],[9,20,9,]),'node_name':([3,10,12,19,],[11,11,22,11,]),'type_annotation':([3,10,19,21,28,41,46,47,],[12,12,12,35,35,35,35,35,]),'entries':([11,22,],[21,41,]),'children_opt':([21,41,45,],[26,52,54,]),'entry':([21,28,41,],[27,44,27,]),'children_block':([21,28,41,45,53,],[29,45,29,29,45,]),'value':([21,28,41,46,47,],[30,30,30,55,56,]),'literal':([21,28,35,41,46,47,],[34,34,49,34,34,34,]),}

_lr_goto = {}
for _k, _v in _lr_goto_items.items():
   for _x, _y in zip(_v[0], _v[1]):
       if not _x in _lr_goto: _lr_goto[_x] = {}
       _lr_goto[_x][_k] = _y
del _lr_goto_items
_lr_productions = [
  ("S' -> document","S'",1,None,None,None),
  ('document -> nodes','document',1,'p_document','node_parser.py',93),
  ('nodes -> seps_opt','nodes',1,'p_nodes_empty','node_parser.py',97),
  ('nodes -> seps_opt node_list seps_opt','nodes',3,'p_nodes_list','node_parser.py',101),
  ('node_list -> node','node_list',1,'p_node_list_single','node_parser.py',105),
  ('node_list -> node_list seps node','node_list',3,'p_node_list_multi','node_parser.py',109),
  ('seps -> NEWLINE','seps',1,'p_seps','node_parser.py',113),
  ('seps -> SEMICOLON','seps',1,'p_seps','node_parser.py',114),
  ('seps -> seps NEWLINE','seps',2,'p_seps','node_parser.py',115),
  ('seps -> seps SEMICOLON','seps',2,'p_seps','node_parser.py',116),
  ('seps_opt -> seps','seps_opt',1,'p_seps_opt','node_parser.py',120),
  ('seps_opt -> <empty>','seps_opt',0,'p_seps_opt','node_parser.py',121),
  ('node -> node_body','node',1,'p_node','node_parser.py',127),
  ('node -> SLASHDASH node_body','node',2,'p_node_slashdash','node_parser.py',131),
  ('node_body -> node_name entries children_opt','node_body',3,'p_node_body','node_parser.py',135),
  ('node_body -> type_annotation node_name entries children_opt','node_body',4,'p_node_body_typed','node_parser.py',139),
  ('node_name -> IDENTIFIER','node_name',1,'p_node_name','node_parser.py',143),
  ('node_name -> STRING','node_name',1,'p_node_name','node_parser.py',144),
  ('type_annotation -> LPAREN IDENTIFIER RPAREN','type_annotation',3,'p_type_annotation','node_parser.py',148),
  ('type_annotation -> LPAREN STRING RPAREN','type_annotation',3,'p_type_annotation','node_parser.py',149),
  ('entries -> <empty>','entries',0,'p_entries_empty','node_parser.py',155),
  ('entries -> entries entry','entries',2,'p_entries_multi','node_parser.py',159),
  ('entries -> entries SLASHDASH entry','entries',3,'p_entries_slashdash','node_parser.py',163),
  ('entry -> value','entry',1,'p_entry_argument','node_parser.py',167),
  ('entry -> IDENTIFIER EQUALS value','entry',3,'p_entry_property','node_parser.py',172),
  ('entry -> STRING EQUALS value','entry',3,'p_entry_property','node_parser.py',173),
  ('value -> literal','value',1,'p_value','node_parser.py',180),
  ('value -> type_annotation literal','value',2,'p_value_typed','node_parser.py',184),
  ('literal -> STRING','literal',1,'p_literal','node_parser.py',188),
  ('literal -> IDENTIFIER','literal',1,'p_literal','node_parser.py',189),
  ('literal -> INTEGER','literal',1,'p_literal','node_parser.py',190),
  ('literal -> FLOAT','literal',1,'p_literal','node_parser.py',191),
  ('literal -> TRUE','literal',1,'p_literal_true','node_parser.py',195),
  ('literal -> FALSE','literal',1,'p_literal_false','node_parser.py',199),
  ('literal -> NULL','literal',1,'p_literal_null','node_parser.py',203),
  ('children_opt -> <empty>','children_opt',0,'p_children_opt_empty','node_parser.py',209),
  ('children_opt -> children_block','children_opt',1,'p_children_opt','node_parser.py',213),
  ('children_opt -> SLASHDASH children_block children_opt','children_opt',3,'p_children_opt_slashdash','node_parser.py',217),
  ('children_block -> LBRACE nodes RBRACE','children_block',3,'p_children_block','node_parser.py',221),
]
